# topmark:header:start
#
#   project      : DoctypeGen
#   file         : version.py
#   file_relpath : src/doctypegen/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""DoctypeGen `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from doctypegen.constants import DOCTYPEGEN_VERSION

if TYPE_CHECKING:
    from doctypegen.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DoctypeGen.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Print the DoctypeGen version installed in the current Python environment."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(console.styled(DOCTYPEGEN_VERSION, bold=True))
