"""Rich-based per-page progress lines."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console
from rich.markup import escape

from mdxscaffold.core.contracts.document import WriteOutcome, WriteResult
from mdxscaffold.core.contracts.progress import ScaffoldProgress


class ConsoleScaffoldProgress(ScaffoldProgress):
    """Prints one line per processed page to stdout; failures go to stderr."""

    _LABELS: ClassVar[dict[WriteOutcome, str]] = {
        WriteOutcome.CREATED: "[green]created[/]",
        WriteOutcome.SKIPPED: "[yellow]skipped[/]",
        WriteOutcome.ERROR: "[red]error[/]  ",
    }

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self._console = console or Console(highlight=False, soft_wrap=True)
        self._error_console = error_console or Console(stderr=True, highlight=False, soft_wrap=True)

    def run_start(self, total: int) -> None:
        self._console.print(f"Creating {total} missing file{'s' if total != 1 else ''}...")
        self._console.print()

    def directory_created(self, directory: str) -> None:
        self._console.print(f"  [blue]mkdir[/]    {escape(directory)}")

    def item_done(self, result: WriteResult) -> None:
        label = self._LABELS[result.outcome]
        target = escape(str(result.target))
        if result.outcome == WriteOutcome.CREATED:
            self._console.print(f"  {label}  {target}")
        elif result.outcome == WriteOutcome.SKIPPED:
            self._console.print(f"  {label}  {target} (already exists)")
        else:
            self._error_console.print(f"  {label}  {escape(result.path)}: {escape(result.error or 'unknown error')}")
