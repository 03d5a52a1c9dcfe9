# topmark:header:start
#
#   project      : StrapiTypes
#   file         : __init__.py
#   file_relpath : src/strapi_types/schema/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Strapi schema model and loader.

- ``model``: immutable descriptors for attributes and schemas.
- ``loader``: project layout checks, schema discovery and JSON parsing.
"""

from __future__ import annotations
