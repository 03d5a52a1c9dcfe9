# topmark:header:start
#
#   project      : StrapiTypes
#   file         : constants.py
#   file_relpath : src/strapi_types/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StrapiTypes Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    STRAPI_TYPES_VERSION: str = get_version("strapi-types")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    STRAPI_TYPES_VERSION = "0.0.0"

# Environment variable holding the internal log level (e.g. "DEBUG", "TRACE", "10"):
LOG_LEVEL_ENV_VAR: str = "STRAPI_TYPES_LOG_LEVEL"

# Strapi project layout, relative to the Strapi root directory:
SRC_DIR_NAME: str = "src"
API_DIR_NAME: str = "api"
COMPONENTS_DIR_NAME: str = "components"

# Discovery patterns (gitwildmatch), relative to the `api` and `components` roots:
API_SCHEMA_PATTERNS: tuple[str, ...] = ("**/schema.json",)
COMPONENT_SCHEMA_PATTERNS: tuple[str, ...] = ("**/*.json",)

# Config file looked up in the Strapi root directory when `--config` is not given:
DEFAULT_CONFIG_FILE_NAME: str = "strapi-types.toml"
CONFIG_SECTION_NAME: str = "strapi-types"

DEFAULT_STRAPI_ROOT_DIRECTORY: str = "."
DEFAULT_CUSTOM_FIELDS_EXTENSION_DIRECTORY: str = "custom-field"

# Custom field extensions:
CUSTOM_FIELD_PLUGIN_PREFIX: str = "plugin::"
CUSTOM_FIELD_EXTENSION_SUFFIX: str = ".py"
CUSTOM_FIELD_EXTENSION_FUNCTION: str = "custom_field_type"
CUSTOM_FIELD_ENTRYPOINT_GROUP: str = "strapi_types.custom_fields"
