# topmark:header:start
#
#   project      : DoctypeGen
#   file         : test_locator.py
#   file_relpath : tests/unit/test_locator.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Unit tests for `doctypegen.locator`."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from doctypegen.locator import DoctypeLocator
from tests.conftest import APPS_PATH, MemoryStorage


def _locate_all(locator: DoctypeLocator, *keys: tuple[str, str]) -> list[Path | None]:
    async def _run() -> list[Path | None]:
        return list(await asyncio.gather(*(locator.locate(app, doctype) for app, doctype in keys)))

    return asyncio.run(_run())


def test_finds_schema_below_module_directory(storage: MemoryStorage) -> None:
    target = APPS_PATH / "erpnext" / "erpnext" / "stock" / "doctype" / "item" / "item.json"
    storage.add(APPS_PATH / "erpnext" / "README.md", "")
    storage.add(APPS_PATH / "erpnext" / "erpnext" / "stock" / "doctype" / "item" / "item.py", "")
    storage.add(target, "{}")

    assert _locate_all(DoctypeLocator(storage, APPS_PATH), ("erpnext", "item")) == [target]


def test_suffix_must_match_whole_path_parts(storage: MemoryStorage) -> None:
    storage.add(APPS_PATH / "app" / "mydoctype" / "item" / "item.json", "{}")
    storage.add(APPS_PATH / "app" / "doctype" / "x_item" / "x_item.json", "{}")

    assert _locate_all(DoctypeLocator(storage, APPS_PATH), ("app", "item")) == [None]


def test_first_match_in_listing_order_wins(storage: MemoryStorage) -> None:
    first = APPS_PATH / "app" / "app" / "selling" / "doctype" / "item" / "item.json"
    second = APPS_PATH / "app" / "app" / "stock" / "doctype" / "item" / "item.json"
    storage.add(first, "{}")
    storage.add(second, "{}")

    assert _locate_all(DoctypeLocator(storage, APPS_PATH), ("app", "item")) == [first]
    # The walk stopped before descending into the second module.
    assert storage.list_calls[APPS_PATH / "app" / "app" / "stock"] == 0


def test_results_and_misses_are_memoized(storage: MemoryStorage) -> None:
    target = APPS_PATH / "app" / "doctype" / "item" / "item.json"
    storage.add(target, "{}")
    locator = DoctypeLocator(storage, APPS_PATH)

    assert _locate_all(locator, ("app", "item"), ("app", "item"), ("app", "nope"), ("app", "nope")) == [
        target,
        target,
        None,
        None,
    ]
    assert locator.lookups == 2
    assert storage.list_calls[APPS_PATH / "app"] == 2


def test_cache_is_keyed_by_app(storage: MemoryStorage) -> None:
    a = APPS_PATH / "a" / "doctype" / "item" / "item.json"
    b = APPS_PATH / "b" / "doctype" / "item" / "item.json"
    storage.add(a, "{}")
    storage.add(b, "{}")

    assert _locate_all(DoctypeLocator(storage, APPS_PATH), ("a", "item"), ("b", "item")) == [a, b]


def test_missing_app_directory_is_not_found(storage: MemoryStorage) -> None:
    storage.add(APPS_PATH / "other" / "doctype" / "item" / "item.json", "{}")
    assert _locate_all(DoctypeLocator(storage, APPS_PATH), ("ghost", "item")) == [None]


def test_storage_errors_propagate(storage: MemoryStorage) -> None:
    class DeniedStorage(MemoryStorage):
        async def list_dir(self, path: Path) -> list[str]:
            raise PermissionError(str(path))

    with pytest.raises(PermissionError):
        _locate_all(DoctypeLocator(DeniedStorage(), APPS_PATH), ("app", "item"))
