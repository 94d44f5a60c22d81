# topmark:header:start
#
#   project      : DoctypeGen
#   file         : errors.py
#   file_relpath : src/doctypegen/errors.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Exceptions raised by the DoctypeGen core.

The core never catches storage errors: an ``OSError`` other than
``FileNotFoundError`` raised while walking, reading or writing propagates
unchanged and aborts the run. The CLI maps these exceptions to exit codes
(see `doctypegen.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class DoctypegenError(Exception):
    """Base class for all DoctypeGen core errors."""


class SchemaParseError(DoctypegenError):
    """A doctype schema file could not be parsed.

    Attributes:
        path (Path): Schema file that failed to parse.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot parse doctype schema {path}: {reason}")
        self.path = path


class ConfigError(DoctypegenError):
    """Configuration is missing, malformed or incomplete."""
