# topmark:header:start
#
#   project      : DoctypeGen
#   file         : constants.py
#   file_relpath : src/doctypegen/constants.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""DoctypeGen Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DOCTYPEGEN_VERSION: str = get_version("doctypegen")

# Config file names looked up in the working directory (first match wins).
DEFAULT_CONFIG_NAME: str = "doctypegen.toml"
PYPROJECT_CONFIG_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "tool.doctypegen"

# Marker line opening every generated interface block.
LAST_UPDATED_PREFIX: str = "// Last updated: "

BASE_DOCTYPE: str = "DocType"
BASE_CHILD_DOCTYPE: str = "ChildDocType"
