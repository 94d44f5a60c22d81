# topmark:header:start
#
#   project      : DoctypeGen
#   file         : model.py
#   file_relpath : src/doctypegen/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot handed to the generator.
    - `MutableConfig`: a builder used while layering sources; it is frozen
      into `Config` once every layer has been applied.

Layers, lowest precedence first:
    1. The discovered (or explicit) config file. Relative paths resolve
       against the config file's directory.
    2. CLI overrides. Relative paths resolve against the invocation CWD.
       Doctypes given on the command line replace the configured ``[apps]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from doctypegen.config.keys import Toml
from doctypegen.config.loaders import discover_config, extract_section, load_toml_dict
from doctypegen.config.logging import get_logger
from doctypegen.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from doctypegen.config.loaders import TomlTable
    from doctypegen.config.logging import DoctypegenLogger

logger: DoctypegenLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        apps_path (Path): Directory containing one sub-directory per app.
        output_path (Path): Generated TypeScript file.
        app_doctypes (Mapping[str, tuple[str, ...]]): Root doctypes per app, in order.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    apps_path: Path
    output_path: Path
    app_doctypes: Mapping[str, tuple[str, ...]]
    config_files: tuple[Path, ...] = ()


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Attributes:
        apps_path (Path | None): Apps directory, if set by any layer.
        output_path (Path | None): Output file, if set by any layer.
        app_doctypes (dict[str, list[str]]): Root doctypes per app.
        config_files (list[Path]): Config files applied so far.
    """

    apps_path: Path | None = None
    output_path: Path | None = None
    app_doctypes: dict[str, list[str]] = field(default_factory=dict)
    config_files: list[Path] = field(default_factory=list)

    def apply_toml(self, table: TomlTable, *, base: Path, source: Path) -> MutableConfig:
        """Merge a DoctypeGen TOML table into this builder.

        Args:
            table (TomlTable): The ``[tool.doctypegen]`` (or whole ``doctypegen.toml``) table.
            base (Path): Directory that relative paths are resolved against.
            source (Path): File the table came from, for error messages.

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a key has the wrong type.
        """
        apps_path = _string_value(table, Toml.KEY_APPS_PATH, source)
        if apps_path is not None:
            self.apps_path = _resolve(apps_path, base)
        output = _string_value(table, Toml.KEY_OUTPUT, source)
        if output is not None:
            self.output_path = _resolve(output, base)

        apps: Any = table.get(Toml.SECTION_APPS)
        if apps is not None:
            if not isinstance(apps, dict):
                raise ConfigError(f"[{Toml.SECTION_APPS}] in {source} must be a table")
            for app, doctypes in apps.items():
                if not isinstance(doctypes, list) or not all(isinstance(d, str) for d in doctypes):
                    raise ConfigError(
                        f"[{Toml.SECTION_APPS}].{app} in {source} must be a list of strings"
                    )
                self.app_doctypes[str(app)] = list(doctypes)
        self.config_files.append(source)
        return self

    def apply_cli(
        self,
        *,
        apps_path: str | None = None,
        output: str | None = None,
        doctypes: Iterable[str] = (),
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Apply command-line overrides.

        Args:
            apps_path (str | None): ``--apps-path`` value.
            output (str | None): ``--output`` value.
            doctypes (Iterable[str]): ``--doctype`` values in ``APP:NAME`` form.
            cwd (Path | None): Base for relative paths (defaults to the CWD).

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a ``--doctype`` value is not ``APP:NAME``.
        """
        base = cwd or Path.cwd()
        if apps_path:
            self.apps_path = _resolve(apps_path, base)
        if output:
            self.output_path = _resolve(output, base)
        requested = parse_doctype_args(doctypes)
        if requested:
            self.app_doctypes = requested
        return self

    def freeze(self) -> Config:
        """Return an immutable `Config`.

        Raises:
            ConfigError: If the apps path, the output path or the doctypes are missing.
        """
        if self.apps_path is None:
            raise ConfigError(f"No apps path configured (set '{Toml.KEY_APPS_PATH}').")
        if self.output_path is None:
            raise ConfigError(f"No output file configured (set '{Toml.KEY_OUTPUT}').")
        if not any(self.app_doctypes.values()):
            raise ConfigError(f"No doctypes configured (add an [{Toml.SECTION_APPS}] table).")
        return Config(
            apps_path=self.apps_path,
            output_path=self.output_path,
            app_doctypes={app: tuple(names) for app, names in self.app_doctypes.items()},
            config_files=tuple(self.config_files),
        )


def parse_doctype_args(values: Iterable[str]) -> dict[str, list[str]]:
    """Group ``APP:NAME`` strings by app, keeping first-seen order.

    Raises:
        ConfigError: If a value lacks the ``:`` separator or either side is empty.
    """
    grouped: dict[str, list[str]] = {}
    for value in values:
        app, sep, name = value.partition(":")
        if not sep or not app.strip() or not name.strip():
            raise ConfigError(f"Invalid doctype {value!r}: expected APP:NAME")
        grouped.setdefault(app.strip(), []).append(name.strip())
    return grouped


def load_config(
    *,
    config_file: Path | None = None,
    apps_path: str | None = None,
    output: str | None = None,
    doctypes: Iterable[str] = (),
    cwd: Path | None = None,
) -> Config:
    """Resolve the effective configuration from file and CLI layers.

    Args:
        config_file (Path | None): Explicit config file; when None, the CWD is searched.
        apps_path (str | None): CLI override for the apps directory.
        output (str | None): CLI override for the output file.
        doctypes (Iterable[str]): CLI ``APP:NAME`` doctypes.
        cwd (Path | None): Working directory (defaults to the process CWD).

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigError: If a source is invalid or required settings are missing.
    """
    base = cwd or Path.cwd()
    builder = MutableConfig()
    if config_file is not None:
        path = config_file if config_file.is_absolute() else base / config_file
        section = extract_section(path, load_toml_dict(path))
        if section is None:
            raise ConfigError(f"No [tool.doctypegen] table in {path}")
        builder.apply_toml(section, base=path.parent, source=path)
    else:
        found = discover_config(base)
        if found is not None:
            path, section = found
            builder.apply_toml(section, base=path.parent, source=path)
    builder.apply_cli(apps_path=apps_path, output=output, doctypes=doctypes, cwd=base)
    config = builder.freeze()
    logger.debug("Effective config: %s", config)
    return config


def _string_value(table: Mapping[str, Any], key: str, source: Path) -> str | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' in {source} must be a string")
    return value


def _resolve(value: str, base: Path) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else (base / path).resolve()
