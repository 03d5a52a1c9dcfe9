# topmark:header:start
#
#   project      : StrapiTypes
#   file         : model.py
#   file_relpath : src/strapi_types/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the generator.
    - `MutableConfig`: a mutable builder used while merging layers; it can be
      frozen into `Config` and thawed back for edits.

Layers (lowest to highest precedence):
    1. built-in defaults;
    2. a TOML config file: ``--config PATH`` or, when not given,
       ``strapi-types.toml`` in the Strapi root directory (if present);
    3. CLI arguments.

TOML keys may live at the top level of the file or under a
``[strapi-types]`` table:

```toml
[strapi-types]
out = "types/strapi.ts"
custom-fields-extension-directory = "custom-field"
strict = false
```

Path semantics:
    - Paths declared in a config file are normalized against that file's directory.
    - CLI paths are normalized against the invocation CWD.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from strapi_types.config.logging import get_logger
from strapi_types.constants import (
    CONFIG_SECTION_NAME,
    DEFAULT_CONFIG_FILE_NAME,
    DEFAULT_CUSTOM_FIELDS_EXTENSION_DIRECTORY,
    DEFAULT_STRAPI_ROOT_DIRECTORY,
)
from strapi_types.core.errors import ConfigError

if TYPE_CHECKING:
    from strapi_types.config.logging import StrapiTypesLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI params and API dicts).
ArgsLike = Mapping[str, Any]

logger: StrapiTypesLogger = get_logger(__name__)

# TOML key -> MutableConfig attribute
_TOML_PATH_KEYS: dict[str, str] = {
    "out": "out",
    "custom-fields-extension-directory": "custom_fields_extension_directory",
}
_TOML_BOOL_KEYS: dict[str, str] = {
    "strict": "strict",
}


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for StrapiTypes.

    Attributes:
        strapi_root_directory (Path): Absolute Strapi project root.
        custom_fields_extension_directory (Path): Absolute directory holding
            custom field extension modules.
        out (Path | None): Output file; None writes to stdout.
        strict (bool): Whether error diagnostics make the CLI exit with a failure code.
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
    """

    strapi_root_directory: Path
    custom_fields_extension_directory: Path
    out: Path | None = None
    strict: bool = False
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            strapi_root_directory=self.strapi_root_directory,
            custom_fields_extension_directory=self.custom_fields_extension_directory,
            out=self.out,
            strict=self.strict,
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


def _abs_path(value: str | Path, base: Path) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base / path
    return path.resolve()


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Fields left to ``None`` are unset and do not override lower layers on
    `merge_with`.
    """

    strapi_root_directory: Path | None = None
    custom_fields_extension_directory: Path | None = None
    out: Path | None = None
    strict: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls, *, cwd: Path | None = None) -> MutableConfig:
        """Return the built-in defaults, with paths resolved against ``cwd``."""
        base: Path = cwd or Path.cwd()
        return cls(
            strapi_root_directory=_abs_path(DEFAULT_STRAPI_ROOT_DIRECTORY, base),
            custom_fields_extension_directory=_abs_path(
                DEFAULT_CUSTOM_FIELDS_EXTENSION_DIRECTORY, base
            ),
            out=None,
            strict=False,
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a config layer from a TOML file.

        Args:
            path: The TOML file. Relative paths inside it resolve against its directory.

        Returns:
            The config layer (unset fields stay ``None``).

        Raises:
            ConfigError: If the file cannot be read or parsed, or holds values
                of the wrong type.
        """
        try:
            text: str = path.read_text(encoding="utf-8")
            doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except TomlkitParseError as e:
            raise ConfigError(f"Cannot parse config file {path}: {e}") from e

        data: dict[str, Any] = cast("dict[str, Any]", doc.unwrap())
        section: Any = data.get(CONFIG_SECTION_NAME, data)
        if not isinstance(section, dict):
            raise ConfigError(f"[{CONFIG_SECTION_NAME}] in {path} is not a table")

        base: Path = path.parent.resolve()
        layer = cls(config_files=[path.resolve()])
        for key, value in cast("dict[str, Any]", section).items():
            if key == CONFIG_SECTION_NAME:
                continue
            if key in _TOML_PATH_KEYS:
                if not isinstance(value, str):
                    raise ConfigError(f"'{key}' in {path} must be a string")
                setattr(layer, _TOML_PATH_KEYS[key], _abs_path(value, base))
            elif key in _TOML_BOOL_KEYS:
                if not isinstance(value, bool):
                    raise ConfigError(f"'{key}' in {path} must be a boolean")
                setattr(layer, _TOML_BOOL_KEYS[key], value)
            else:
                logger.warning("Ignoring unknown config key '%s' in %s", key, path)
        logger.debug("Loaded config layer from %s: %s", path, layer)
        return layer

    @classmethod
    def from_cli_args(cls, args: ArgsLike, *, cwd: Path | None = None) -> MutableConfig:
        """Build a config layer from CLI arguments (``None`` values are unset).

        Recognized keys: ``strapi_root_directory``, ``custom_fields_extension_directory``,
        ``out``, ``strict``.
        """
        base: Path = cwd or Path.cwd()
        layer = cls()
        for key in ("strapi_root_directory", "custom_fields_extension_directory", "out"):
            value: Any = args.get(key)
            if value is not None:
                setattr(layer, key, _abs_path(value, base))
        strict: Any = args.get("strict")
        if strict is not None:
            layer.strict = bool(strict)
        return layer

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            strapi_root_directory=other.strapi_root_directory or self.strapi_root_directory,
            custom_fields_extension_directory=(
                other.custom_fields_extension_directory
                or self.custom_fields_extension_directory
            ),
            out=other.out or self.out,
            strict=other.strict if other.strict is not None else self.strict,
            config_files=self.config_files + other.config_files,
        )

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling unset fields with defaults."""
        defaults: MutableConfig = MutableConfig.from_defaults()
        merged: MutableConfig = defaults.merge_with(self)
        return Config(
            strapi_root_directory=cast("Path", merged.strapi_root_directory),
            custom_fields_extension_directory=cast(
                "Path", merged.custom_fields_extension_directory
            ),
            out=merged.out,
            strict=bool(merged.strict),
            config_files=tuple(merged.config_files),
        )

    @classmethod
    def load_merged(
        cls,
        args: ArgsLike | None = None,
        *,
        config_file: Path | str | None = None,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Merge defaults, the config file and CLI arguments into a draft config.

        When ``config_file`` is None, ``strapi-types.toml`` is looked up in the
        Strapi root directory (from ``args`` or the default) and used if present.

        Args:
            args: CLI arguments (see `from_cli_args`).
            config_file: Explicit config file; must exist.
            cwd: Base directory for relative CLI paths (defaults to the CWD).

        Returns:
            The merged draft.

        Raises:
            ConfigError: If the config file is missing (when explicit) or invalid.
        """
        base: Path = cwd or Path.cwd()
        defaults: MutableConfig = cls.from_defaults(cwd=base)
        cli_layer: MutableConfig = cls.from_cli_args(args or {}, cwd=base)

        if config_file is not None:
            toml_path: Path = _abs_path(config_file, base)
            if not toml_path.is_file():
                raise ConfigError(f"Config file {toml_path} does not exist")
        else:
            root: Path = cast(
                "Path", cli_layer.strapi_root_directory or defaults.strapi_root_directory
            )
            toml_path = root / DEFAULT_CONFIG_FILE_NAME

        merged: MutableConfig = defaults
        if toml_path.is_file():
            merged = merged.merge_with(cls.from_toml_file(toml_path))
        else:
            logger.debug("No config file at %s", toml_path)
        return merged.merge_with(cli_layer)
