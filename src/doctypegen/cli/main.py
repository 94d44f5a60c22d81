# topmark:header:start
#
#   project      : DoctypeGen
#   file         : main.py
#   file_relpath : src/doctypegen/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""DoctypeGen Click CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

import click

from doctypegen.cli.commands.generate import generate_command
from doctypegen.cli.commands.version import version_command
from doctypegen.cli.console import ClickConsole
from doctypegen.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from doctypegen.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env, independently of -v/-q
    setup_logging(level=resolve_env_log_level())

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Compile Frappe doctype schemas into TypeScript interfaces.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the DoctypeGen CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'doctypegen generate' to update the interfaces file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(generate_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
