# topmark:header:start
#
#   project      : DoctypeGen
#   file         : existing.py
#   file_relpath : src/doctypegen/existing.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Recover interface blocks from a previously generated output file.

The output file is plain TypeScript, not a serialization format, so blocks
are recognized by their two-line head: the ``// Last updated:`` marker line
immediately followed by an ``export interface <Name> extends <Base> {`` line,
captured through the closing brace on a line of its own. Braces inside
members (labels, Select literals) never end a block, and a block with no
closing line is not recovered at all. The base declarations carry no marker
and are therefore never returned.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from doctypegen.config.logging import get_logger
from doctypegen.constants import LAST_UPDATED_PREFIX

if TYPE_CHECKING:
    from pathlib import Path

    from doctypegen.config.logging import DoctypegenLogger
    from doctypegen.storage import Storage

logger: DoctypegenLogger = get_logger(__name__)

BLOCK_RE: re.Pattern[str] = re.compile(
    rf"^{re.escape(LAST_UPDATED_PREFIX)}(?P<last_updated>[^\n]+)\n"
    r"export interface\s+(?P<name>\w+)\s+extends\s+\w+\s+\{\n"
    rf"(?:(?!^{re.escape(LAST_UPDATED_PREFIX)}).)*?"
    r"^\}$\n?",
    re.MULTILINE | re.DOTALL,
)


@dataclass(frozen=True, slots=True)
class ExistingInterface:
    """An interface block found in previous output.

    Attributes:
        name (str): Interface name.
        last_updated (str): Timestamp from the block's marker line.
        text (str): Verbatim block text, newline-terminated.
    """

    name: str
    last_updated: str
    text: str


def parse_existing_output(text: str) -> dict[str, ExistingInterface]:
    """Extract generated interface blocks from output text.

    Blocks may appear in any order; if a name occurs twice, the later block wins.
    CRLF line endings are read as LF.

    Args:
        text (str): Previously generated output.

    Returns:
        dict[str, ExistingInterface]: Blocks keyed by interface name, in file order.
    """
    found: dict[str, ExistingInterface] = {}
    text = text.replace("\r\n", "\n")
    for match in BLOCK_RE.finditer(text):
        block: str = match.group(0)
        if not block.endswith("\n"):
            block += "\n"
        name: str = match.group("name")
        found[name] = ExistingInterface(
            name=name,
            last_updated=match.group("last_updated"),
            text=block,
        )
    logger.debug("Recovered %d interface block(s) from existing output", len(found))
    return found


async def load_existing_output(storage: Storage, path: Path) -> dict[str, ExistingInterface]:
    """Read and parse the output file at ``path``.

    A missing file is an empty baseline; any other storage error propagates.
    """
    try:
        text: str = await storage.read_text(path)
    except FileNotFoundError:
        logger.info("No existing output at %s; starting from an empty baseline", path)
        return {}
    return parse_existing_output(text)
