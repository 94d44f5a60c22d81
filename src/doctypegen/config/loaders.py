# topmark:header:start
#
#   project      : DoctypeGen
#   file         : loaders.py
#   file_relpath : src/doctypegen/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Load TOML configuration sources.

DoctypeGen reads its settings from ``doctypegen.toml`` or from the
``[tool.doctypegen]`` table of ``pyproject.toml``. Parsing is done with
`tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from doctypegen.config.keys import Toml
from doctypegen.config.logging import get_logger
from doctypegen.constants import DEFAULT_CONFIG_NAME, PYPROJECT_CONFIG_NAME
from doctypegen.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from doctypegen.config.logging import DoctypegenLogger

TomlTable = dict[str, Any]

logger: DoctypegenLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_section(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the DoctypeGen table of a parsed config file.

    ``pyproject.toml`` files yield their ``[tool.doctypegen]`` table (or None
    when absent); any other file is taken as a whole.
    """
    if path.name != PYPROJECT_CONFIG_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_DOCTYPEGEN) if isinstance(tool, dict) else None
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.doctypegen] in {path} must be a table")
    return cast("TomlTable", section)


def discover_config(directory: Path) -> tuple[Path, TomlTable] | None:
    """Find the configuration in ``directory``.

    ``doctypegen.toml`` wins over ``pyproject.toml``; a ``pyproject.toml``
    without a ``[tool.doctypegen]`` table is ignored.

    Returns:
        tuple[Path, TomlTable] | None: The config file and its table, or None.
    """
    for name in (DEFAULT_CONFIG_NAME, PYPROJECT_CONFIG_NAME):
        candidate = directory / name
        if not candidate.is_file():
            continue
        section = extract_section(candidate, load_toml_dict(candidate))
        if section is not None:
            logger.debug("Using configuration from %s", candidate)
            return candidate, section
    logger.debug("No configuration file found in %s", directory)
    return None
