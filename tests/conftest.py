# topmark:header:start
#
#   project      : DoctypeGen
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Pytest configuration for the DoctypeGen test suite.

Provides an in-memory `Storage` double that counts directory listings,
reads and writes, plus helpers to lay out Frappe-style app trees in it.
Paths are plain `Path` objects used as keys; nothing touches the disk.
"""

from __future__ import annotations

import asyncio
import json
from collections import Counter
from pathlib import Path
from typing import Any, Callable

import pytest

from doctypegen.schema import doctype_request_name

APPS_PATH = Path("/srv/bench/apps")
OUTPUT_PATH = Path("/srv/frontend/src/types/doctypes.ts")


class MemoryStorage:
    """In-memory `Storage` keyed by path, listing entries in insertion order."""

    def __init__(self) -> None:
        self.files: dict[Path, str] = {}
        self.list_calls: Counter[Path] = Counter()
        self.reads: Counter[Path] = Counter()
        self.writes: list[tuple[Path, str]] = []

    def add(self, path: Path, text: str) -> None:
        """Store ``text`` at ``path`` (synchronously, for test setup)."""
        self.files[path] = text

    def _children(self, path: Path) -> list[str]:
        names: dict[str, None] = {}
        for file_path in self.files:
            if path in file_path.parents:
                names[file_path.relative_to(path).parts[0]] = None
        return list(names)

    async def list_dir(self, path: Path) -> list[str]:
        self.list_calls[path] += 1
        await asyncio.sleep(0)
        children = self._children(path)
        if not children:
            raise FileNotFoundError(str(path))
        return children

    async def is_dir(self, path: Path) -> bool:
        await asyncio.sleep(0)
        return any(path in file_path.parents for file_path in self.files)

    async def read_text(self, path: Path) -> str:
        self.reads[path] += 1
        await asyncio.sleep(0)
        if path not in self.files:
            raise FileNotFoundError(str(path))
        return self.files[path]

    async def write_text(self, path: Path, text: str) -> int:
        await asyncio.sleep(0)
        self.writes.append((path, text))
        self.files[path] = text
        return len(text.encode("utf-8"))


def schema_dict(
    name: str,
    modified: str,
    fields: list[dict[str, Any]] | None = None,
    *,
    istable: bool = False,
) -> dict[str, Any]:
    """Return a doctype JSON object as Frappe writes it."""
    data: dict[str, Any] = {
        "doctype": "DocType",
        "name": name,
        "modified": modified,
        "fields": fields or [],
    }
    if istable:
        data["istable"] = 1
    return data


def add_schema(
    storage: MemoryStorage,
    app: str,
    name: str,
    modified: str,
    fields: list[dict[str, Any]] | None = None,
    *,
    istable: bool = False,
    module: str = "setup",
) -> Path:
    """Lay out a schema at ``<app>/<app>/<module>/doctype/<dir>/<dir>.json``."""
    request = doctype_request_name(name)
    path = APPS_PATH / app / app / module / "doctype" / request / f"{request}.json"
    storage.add(path, json.dumps(schema_dict(name, modified, fields, istable=istable), indent=1))
    return path


@pytest.fixture
def storage() -> MemoryStorage:
    """Fresh in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def add_doctype(storage: MemoryStorage) -> Callable[..., Path]:
    """Return `add_schema` bound to the ``storage`` fixture."""

    def _add(app: str, name: str, modified: str, fields: list[dict[str, Any]] | None = None, **kw: Any) -> Path:
        return add_schema(storage, app, name, modified, fields, **kw)

    return _add


@pytest.fixture(autouse=True)
def silence_doctypegen_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv("DOCTYPEGEN_LOG_LEVEL", raising=False)
