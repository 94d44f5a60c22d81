# topmark:header:start
#
#   project      : DoctypeGen
#   file         : generate.py
#   file_relpath : src/doctypegen/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""DoctypeGen `generate` command.

Resolves the configuration (config file + CLI overrides), runs the
incremental generator, and reports the outcome.

Exit codes:
    - ``SUCCESS`` when the output is up to date or was rewritten.
    - ``WOULD_CHANGE`` with ``--check`` when interfaces are out of date.
    - ``CONFIG_ERROR``, ``ENCODING_ERROR`` (malformed schema) or ``IO_ERROR``
      on failure; nothing is written in that case.
    - ``UNEXPECTED_ERROR`` for any other failure.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from doctypegen.cli.errors import (
    DoctypegenConfigError,
    DoctypegenIOError,
    DoctypegenSchemaError,
    DoctypegenUnexpectedError,
)
from doctypegen.cli.exit_codes import ExitCode
from doctypegen.config import load_config
from doctypegen.config.logging import get_logger
from doctypegen.errors import ConfigError, SchemaParseError
from doctypegen.generator import generate
from doctypegen.status import ConsoleStatus, NullStatus

if TYPE_CHECKING:
    from doctypegen.cli.console import ConsoleLike
    from doctypegen.config import Config
    from doctypegen.config.logging import DoctypegenLogger
    from doctypegen.generator import GenerationReport
    from doctypegen.status import StatusSink

logger: DoctypegenLogger = get_logger(__name__)


@click.command(
    name="generate",
    help=(
        "Generate TypeScript interfaces for the configured doctypes. "
        "Interfaces whose schema is unchanged are kept as they are."
    ),
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (doctypegen.toml or pyproject.toml). Default: discovered in the CWD.",
)
@click.option(
    "--apps-path",
    "apps_path",
    type=str,
    default=None,
    help="Directory containing the Frappe apps.",
)
@click.option(
    "--output",
    "-o",
    "output",
    type=str,
    default=None,
    help="Generated TypeScript file.",
)
@click.option(
    "--doctype",
    "-d",
    "doctypes",
    multiple=True,
    metavar="APP:NAME",
    help="Root doctype to generate (repeatable). Replaces the configured [apps].",
)
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Do not write; exit with code 2 if interfaces are out of date.",
)
@click.pass_context
def generate_command(
    ctx: click.Context,
    *,
    config_file: Path | None,
    apps_path: str | None,
    output: str | None,
    doctypes: tuple[str, ...],
    check: bool,
) -> None:
    """Run one incremental generation pass."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", logging.WARNING)

    try:
        config: Config = load_config(
            config_file=config_file,
            apps_path=apps_path,
            output=output,
            doctypes=doctypes,
        )
    except ConfigError as exc:
        raise DoctypegenConfigError(str(exc)) from exc

    status: StatusSink = (
        NullStatus()
        if vlevel >= logging.ERROR
        else ConsoleStatus(console, show_progress=vlevel <= logging.INFO)
    )

    try:
        report: GenerationReport = generate(config, status=status, write=not check)
    except SchemaParseError as exc:
        raise DoctypegenSchemaError(str(exc)) from exc
    except OSError as exc:
        raise DoctypegenIOError(f"{exc.__class__.__name__}: {exc}") from exc
    except Exception as exc:
        logger.exception("Unexpected error during generation")
        raise DoctypegenUnexpectedError(f"{exc.__class__.__name__}: {exc}") from exc

    if report.missing and vlevel <= logging.INFO:
        console.warn(f"Doctypes without schema: {', '.join(sorted(report.missing))}")

    if check and report.changed:
        ctx.exit(ExitCode.WOULD_CHANGE)
