# topmark:header:start
#
#   project      : DoctypeGen
#   file         : keys.py
#   file_relpath : src/doctypegen/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Canonical TOML section and key names for DoctypeGen configuration.

Keys defined here are the external configuration API as it appears in
``doctypegen.toml`` and in ``[tool.doctypegen]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DoctypeGen configuration."""

    SECTION_TOOL: Final[str] = "tool"
    SECTION_DOCTYPEGEN: Final[str] = "doctypegen"

    KEY_APPS_PATH: Final[str] = "apps_path"
    KEY_OUTPUT: Final[str] = "output"

    # [apps]: app name -> list of root doctype names
    SECTION_APPS: Final[str] = "apps"
