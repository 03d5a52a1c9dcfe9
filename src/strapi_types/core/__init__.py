# topmark:header:start
#
#   project      : StrapiTypes
#   file         : __init__.py
#   file_relpath : src/strapi_types/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across StrapiTypes.

Included modules:

- ``diagnostics``
  Internal diagnostic types and helpers (levels, messages, aggregation) used
  to collect and report info, warnings, and errors consistently.

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical.

- ``errors``
  Library exceptions raised by the loader and the config layer.
"""

from __future__ import annotations
