# topmark:header:start
#
#   project      : DoctypeGen
#   file         : locator.py
#   file_relpath : src/doctypegen/locator.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Locate doctype schema files below application directories.

Frappe apps keep each doctype at ``.../doctype/<name>/<name>.json`` somewhere
below the app directory (the module directory in between varies). The
locator walks the app tree depth-first, in directory-listing order, and
returns the first file whose trailing path parts match. When two apps or
modules hold the same doctype, the winner depends on listing order.

Results, misses included, are memoized per ``(app, doctype)`` for the
lifetime of the locator. Concurrent lookups of the same key share one walk.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

from doctypegen.config.logging import get_logger

if TYPE_CHECKING:
    from doctypegen.config.logging import DoctypegenLogger
    from doctypegen.storage import Storage

logger: DoctypegenLogger = get_logger(__name__)


def target_parts(doctype: str) -> tuple[str, str, str]:
    """Return the trailing path parts identifying the schema file of ``doctype``."""
    return ("doctype", doctype, f"{doctype}.json")


class DoctypeLocator:
    """Memoizing schema file finder.

    Args:
        storage (Storage): Store to walk.
        apps_path (Path): Directory containing one sub-directory per app.

    Attributes:
        lookups (int): Number of directory walks actually performed.
    """

    def __init__(self, storage: Storage, apps_path: Path) -> None:
        self.storage = storage
        self.apps_path = apps_path
        self.lookups = 0
        self._cache: dict[tuple[str, str], asyncio.Task[Path | None]] = {}

    async def locate(self, app: str, doctype: str) -> Path | None:
        """Return the schema path for ``doctype`` in ``app``, or None if absent.

        Raises:
            OSError: On storage failures other than a missing app directory.
        """
        key = (app, doctype)
        task = self._cache.get(key)
        if task is None:
            task = asyncio.ensure_future(self._find(app, doctype))
            self._cache[key] = task
        else:
            logger.trace("Locator cache hit for %s/%s", app, doctype)
        return await task

    async def _find(self, app: str, doctype: str) -> Path | None:
        self.lookups += 1
        root = self.apps_path / app
        try:
            found = await self._walk(root, target_parts(doctype))
        except FileNotFoundError:
            logger.warning("App directory not found: %s", root)
            found = None
        if found is None:
            logger.debug("No schema for %s/%s below %s", app, doctype, root)
        else:
            logger.debug("Schema for %s/%s: %s", app, doctype, found)
        return found

    async def _walk(self, directory: Path, suffix: tuple[str, ...]) -> Path | None:
        for entry in await self.storage.list_dir(directory):
            full_path = directory / entry
            if await self.storage.is_dir(full_path):
                found = await self._walk(full_path, suffix)
                if found is not None:
                    return found
            elif full_path.parts[-len(suffix) :] == suffix:
                return full_path
        return None
