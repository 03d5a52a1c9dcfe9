# topmark:header:start
#
#   project      : StrapiTypes
#   file         : __init__.py
#   file_relpath : src/strapi_types/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StrapiTypes package.

StrapiTypes reads the content-type and component schemas of a Strapi project
and generates TypeScript interfaces describing the payloads accepted by the
Strapi REST API. It exposes both a CLI and a small typed API for automation.
"""

from __future__ import annotations
