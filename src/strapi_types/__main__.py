# topmark:header:start
#
#   project      : StrapiTypes
#   file         : __main__.py
#   file_relpath : src/strapi_types/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running StrapiTypes via ``python -m strapi_types``.

It delegates directly to :func:`strapi_types.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how StrapiTypes is launched.

Examples:
    Generate types for the Strapi project in the current directory::

        python -m strapi_types --out types/strapi.ts
"""

from __future__ import annotations

from strapi_types.cli.main import cli

if __name__ == "__main__":
    cli()
