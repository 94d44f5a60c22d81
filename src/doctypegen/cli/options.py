# topmark:header:start
#
#   project      : DoctypeGen
#   file         : options.py
#   file_relpath : src/doctypegen/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Common CLI option utilities.

Reusable options (verbosity, color) and their resolution logic, so the group
and its commands stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

import click

from doctypegen.cli.errors import DoctypegenUsageError
from doctypegen.config.logging import TRACE_LEVEL

F = TypeVar("F", bound=Callable[..., object])


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: A logging-style level (lower is more verbose).

    Raises:
        DoctypegenUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DoctypegenUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: F) -> F:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


def common_color_options(f: F) -> F:
    """Add the ``--no-color`` flag to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable colored output.",
    )(f)
