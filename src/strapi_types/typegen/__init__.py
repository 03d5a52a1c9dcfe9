# topmark:header:start
#
#   project      : StrapiTypes
#   file         : __init__.py
#   file_relpath : src/strapi_types/typegen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeScript generation from Strapi schemas.

- ``naming``: interface name derivation.
- ``mapper``: attribute descriptor to TypeScript type expression.
- ``custom_fields``: resolver for custom field extensions.
- ``assembler``: interface assembly and rendering.
"""

from __future__ import annotations
