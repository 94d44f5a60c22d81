# topmark:header:start
#
#   project      : DoctypeGen
#   file         : status.py
#   file_relpath : src/doctypegen/status.py
#   license      : MIT
#   copyright    : (c) 2025 DoctypeGen contributors
#
# topmark:header:end

"""Progress reporting sinks.

The generator reports transient progress ("Processing: item [skipped]") and
one final outcome message through a `StatusSink`. Sinks are user-facing
output, separate from logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from doctypegen.cli.console import ConsoleLike


class StatusSink(Protocol):
    """Minimal interface for a progress reporter."""

    def update(self, text: str) -> None:
        """Replace the transient progress text."""
        ...

    def succeed(self, text: str) -> None:
        """Report a successful final outcome."""
        ...

    def info(self, text: str) -> None:
        """Report a neutral final outcome."""
        ...


class NullStatus:
    """Sink that discards everything."""

    def update(self, text: str) -> None:  # noqa: D102
        pass

    def succeed(self, text: str) -> None:  # noqa: D102
        pass

    def info(self, text: str) -> None:  # noqa: D102
        pass


@dataclass
class RecordingStatus:
    """Sink that keeps every message, for API callers and tests."""

    updates: list[str] = field(default_factory=list)
    final: list[str] = field(default_factory=list)

    def update(self, text: str) -> None:  # noqa: D102
        self.updates.append(text)

    def succeed(self, text: str) -> None:  # noqa: D102
        self.final.append(text)

    def info(self, text: str) -> None:  # noqa: D102
        self.final.append(text)


class ConsoleStatus:
    """Sink printing through the CLI console.

    Args:
        console (ConsoleLike): Output console.
        show_progress (bool): If True, transient updates are printed as well.
    """

    def __init__(self, console: ConsoleLike, *, show_progress: bool = False) -> None:
        self.console = console
        self.show_progress = show_progress

    def update(self, text: str) -> None:  # noqa: D102
        if self.show_progress:
            self.console.print(self.console.styled(text, dim=True))

    def succeed(self, text: str) -> None:  # noqa: D102
        self.console.print(self.console.styled(f"✔ {text}", fg="green"))

    def info(self, text: str) -> None:  # noqa: D102
        self.console.print(self.console.styled(f"ℹ {text}", fg="blue"))
