# topmark:header:start
#
#   project      : DoctypeGen
#   file         : storage.py
#   file_relpath : src/doctypegen/storage.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Storage abstraction used by the generator.

The generator only needs four operations: list a directory, tell
directories from files, read a text file, and write a text file in one
piece. `Storage` captures that surface so tests can swap in an in-memory
store; `FileSystemStorage` is the real implementation.

All methods are coroutines. `FileSystemStorage` runs the blocking calls in a
worker thread so that concurrently resolved doctypes interleave on the event
loop.
"""

from __future__ import annotations

import asyncio
import os
import stat
import tempfile
from pathlib import Path
from typing import Protocol

from doctypegen.config.logging import DoctypegenLogger, get_logger

logger: DoctypegenLogger = get_logger(__name__)


def _process_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


# Read once at import; os.umask can only be queried by setting it.
UMASK: int = _process_umask()


class Storage(Protocol):
    """Protocol for the byte store holding schemas and generated output."""

    async def list_dir(self, path: Path) -> list[str]:
        """Return entry names of directory ``path`` in listing order.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
        """
        ...

    async def is_dir(self, path: Path) -> bool:
        """Return True if ``path`` is a directory."""
        ...

    async def read_text(self, path: Path) -> str:
        """Return the UTF-8 content of ``path``.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
        """
        ...

    async def write_text(self, path: Path, text: str) -> int:
        """Replace ``path`` with ``text`` in one step and return the bytes written."""
        ...


def write_atomic(path: Path, text: str) -> int:
    """Write ``text`` to ``path`` through a temporary sibling file and ``os.replace``.

    Parent directories are created as needed. Readers either see the old file
    or the complete new one. An existing file keeps its permission bits; a new
    one gets ``0o666`` minus the process umask.

    Args:
        path (Path): Destination file.
        text (str): Content to write (UTF-8).

    Returns:
        int: Number of bytes written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data: bytes = text.encode("utf-8")
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        try:
            mode = stat.S_IMODE(os.stat(path).st_mode)
        except FileNotFoundError:
            mode = 0o666 & ~UMASK
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)


class FileSystemStorage:
    """`Storage` backed by the local file system."""

    async def list_dir(self, path: Path) -> list[str]:  # noqa: D102
        return await asyncio.to_thread(os.listdir, path)

    async def is_dir(self, path: Path) -> bool:  # noqa: D102
        return await asyncio.to_thread(path.is_dir)

    async def read_text(self, path: Path) -> str:  # noqa: D102
        return await asyncio.to_thread(path.read_text, encoding="utf-8")

    async def write_text(self, path: Path, text: str) -> int:  # noqa: D102
        return await asyncio.to_thread(write_atomic, path, text)
