# topmark:header:start
#
#   project      : DoctypeGen
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""CLI test helpers for running DoctypeGen in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so config discovery and relative paths resolve
against the temporary project, as they would for a user running the tool
from their frontend root.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from doctypegen.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI (colors disabled) with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (Sequence[str]): Arguments after the program name.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    prev = os.getcwd()
    os.chdir(tmp_path)
    try:
        return CliRunner().invoke(cli, ["--no-color", *argv])
    finally:
        os.chdir(prev)
