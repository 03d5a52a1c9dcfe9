# topmark:header:start
#
#   project      : StrapiTypes
#   file         : __init__.py
#   file_relpath : src/strapi_types/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StrapiTypes CLI package.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        strapi-types = "strapi_types.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main at module import time
