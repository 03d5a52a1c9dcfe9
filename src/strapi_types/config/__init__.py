# topmark:header:start
#
#   project      : StrapiTypes
#   file         : __init__.py
#   file_relpath : src/strapi_types/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for StrapiTypes.

Re-exports the immutable `Config` snapshot and its `MutableConfig` builder.
Logging setup lives in [`strapi_types.config.logging`][] and is imported
explicitly by callers.
"""

from __future__ import annotations

from strapi_types.config.model import Config, MutableConfig

__all__: list[str] = [
    "Config",
    "MutableConfig",
]
