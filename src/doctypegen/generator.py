# topmark:header:start
#
#   project      : DoctypeGen
#   file         : generator.py
#   file_relpath : src/doctypegen/generator.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Incremental doctype-to-interface generation.

`InterfaceGenerator.run` drives one generation run:

1. Recover the blocks of the previous output file (`doctypegen.existing`).
2. Resolve every requested ``(app, doctype)`` root concurrently. Resolving a
   doctype locates and loads its schema, keeps the previous block when the
   embedded timestamp still matches ``modified``, and otherwise renders a new
   block and resolves the child doctypes of its table fields as part of the
   same fan-out.
3. Write the merged document once, and only if at least one block changed.

Concurrency is cooperative (one event loop). The processed-set insertion in
`InterfaceGenerator.resolve` happens before the first ``await``, so two
concurrent requests for the same doctype can never both pass the guard.
All run state lives on the generator instance and is reset by `run`.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from doctypegen.config.logging import get_logger
from doctypegen.emitter import emit_interface, render_output
from doctypegen.existing import load_existing_output
from doctypegen.locator import DoctypeLocator
from doctypegen.schema import load_schema
from doctypegen.status import NullStatus
from doctypegen.storage import FileSystemStorage

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from doctypegen.config import Config
    from doctypegen.config.logging import DoctypegenLogger
    from doctypegen.status import StatusSink
    from doctypegen.storage import Storage

logger: DoctypegenLogger = get_logger(__name__)


def plural(count: int, word: str) -> str:
    """Return ``"<count> <word>"`` with an ``s`` unless count is 1."""
    return f"{count} {word}{'' if count == 1 else 's'}"


@dataclass
class GenerationReport:
    """Outcome of one generation run.

    Attributes:
        output_path (Path): Output file of the run.
        updated (list[str]): Interfaces rendered afresh, in completion order.
        skipped (list[str]): Doctypes whose previous block was kept.
        missing (list[str]): Doctype requests without a schema file.
        written (bool): Whether the output file was written.
        output (str | None): The merged document, when anything changed.
    """

    output_path: Path
    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    written: bool = False
    output: str | None = None

    @property
    def changed(self) -> bool:
        """True if at least one interface was regenerated."""
        return bool(self.updated)

    def summary(self) -> str:
        """Return the one-line human summary of the run."""
        if not self.changed:
            return "No new schema changes."
        count = plural(len(self.updated), "interface")
        if self.written:
            return f"Updated {count}. Output file updated."
        return f"{count} would be updated."


class InterfaceGenerator:
    """Generate TypeScript interfaces for doctypes, reusing unchanged blocks.

    Args:
        storage (Storage): Store holding schemas and the output file.
        apps_path (Path): Directory holding one sub-directory per app.
        app_doctypes (Mapping[str, Sequence[str]]): Root doctype names per app.
        output_path (Path): Generated TypeScript file (read, then rewritten).
        status (StatusSink | None): Progress sink; defaults to `NullStatus`.

    Attributes:
        processed (set[str]): Doctype names requested so far in this run.
        interfaces (dict[str, str]): Merged blocks keyed by interface name.
        loads (int): Number of schema files loaded in this run.
        locator (DoctypeLocator): Locator of the current run.
    """

    def __init__(
        self,
        storage: Storage,
        apps_path: Path,
        app_doctypes: Mapping[str, Sequence[str]],
        output_path: Path,
        *,
        status: StatusSink | None = None,
    ) -> None:
        self.storage = storage
        self.apps_path = apps_path
        self.app_doctypes = app_doctypes
        self.output_path = output_path
        self.status: StatusSink = status or NullStatus()
        self._reset()

    def _reset(self) -> None:
        self.processed: set[str] = set()
        self.interfaces: dict[str, str] = {}
        self._timestamps: dict[str, str] = {}
        self.loads = 0
        self.locator = DoctypeLocator(self.storage, self.apps_path)
        self.report = GenerationReport(output_path=self.output_path)

    async def run(self, *, write: bool = True) -> GenerationReport:
        """Run one generation pass.

        Args:
            write (bool): If False, compute the merged output but never write it.

        Returns:
            GenerationReport: What changed and whether the output was written.

        Raises:
            SchemaParseError: If a located schema file is malformed.
            OSError: On storage failures other than missing files.
        """
        self._reset()
        for existing in (await load_existing_output(self.storage, self.output_path)).values():
            self.interfaces[existing.name] = existing.text
            self._timestamps[existing.name] = existing.last_updated
        logger.debug("Baseline holds %d interface(s)", len(self.interfaces))

        await asyncio.gather(
            *(
                self.resolve(app, doctype)
                for app, doctypes in self.app_doctypes.items()
                for doctype in doctypes
            )
        )

        report = self.report
        logger.info(
            "Run finished: %d updated, %d skipped, %d missing",
            len(report.updated),
            len(report.skipped),
            len(report.missing),
        )
        if not report.changed:
            self.status.info(report.summary())
            return report

        report.output = render_output(list(self.interfaces.values()))
        if write:
            await self.storage.write_text(self.output_path, report.output)
            report.written = True
            self.status.succeed(report.summary())
        else:
            self.status.info(report.summary())
        return report

    async def resolve(self, app: str, doctype: str) -> None:
        """Generate the interface for ``doctype`` and, transitively, its child tables.

        Idempotent per run: repeated requests for the same doctype return at once.
        A doctype without a schema file is recorded and skipped.

        Args:
            app (str): App directory to search.
            doctype (str): Doctype request name (directory name, e.g. ``sales_invoice``).
        """
        if doctype in self.processed:
            logger.trace("Already requested: %s", doctype)
            return
        self.processed.add(doctype)

        path = await self.locator.locate(app, doctype)
        if path is None:
            self.report.missing.append(doctype)
            self.status.update(f"Processing: {doctype} [not found]")
            return

        schema = await load_schema(self.storage, path)
        self.loads += 1
        name = schema.interface_name
        if self._timestamps.get(name) == schema.modified:
            self.report.skipped.append(doctype)
            self.status.update(f"Processing: {doctype} [skipped]")
            return

        emitted = emit_interface(schema)
        if emitted.references:
            await asyncio.gather(*(self.resolve(app, ref) for ref in emitted.references))

        self.interfaces[name] = emitted.text
        self._timestamps[name] = emitted.last_updated
        self.report.updated.append(name)
        self.status.update(f"Processing: {doctype} [updated]")


def generate(
    config: Config,
    *,
    status: StatusSink | None = None,
    write: bool = True,
    storage: Storage | None = None,
) -> GenerationReport:
    """Run `InterfaceGenerator` for ``config`` on a fresh event loop.

    Args:
        config (Config): Resolved configuration.
        status (StatusSink | None): Progress sink.
        write (bool): If False, never write the output file.
        storage (Storage | None): Store to use; defaults to `FileSystemStorage`.

    Returns:
        GenerationReport: The run outcome.
    """
    generator = InterfaceGenerator(
        storage or FileSystemStorage(),
        config.apps_path,
        config.app_doctypes,
        config.output_path,
        status=status,
    )
    return asyncio.run(generator.run(write=write))
