"""Tests for ConsoleScaffoldProgress and NullScaffoldProgress."""

from __future__ import annotations

import io
from pathlib import Path

from rich.console import Console

from mdxscaffold.cli.progress.console import ConsoleScaffoldProgress
from mdxscaffold.core.contracts.document import WriteOutcome, WriteResult
from mdxscaffold.core.contracts.progress import NullScaffoldProgress, ScaffoldProgress


def _consoles() -> tuple[Console, io.StringIO, Console, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    return (
        Console(file=out, highlight=False, soft_wrap=True),
        out,
        Console(file=err, highlight=False, soft_wrap=True),
        err,
    )


class TestNullScaffoldProgress:
    def test_implements_protocol(self) -> None:
        assert issubclass(NullScaffoldProgress, ScaffoldProgress)

    def test_events_are_noop(self) -> None:
        progress = NullScaffoldProgress()
        progress.run_start(3)
        progress.directory_created("guides")
        progress.item_done(
            WriteResult(path="a", target=Path("a.mdx"), category="guides", outcome=WriteOutcome.CREATED)
        )


class TestConsoleScaffoldProgress:
    def test_implements_protocol(self) -> None:
        assert issubclass(ConsoleScaffoldProgress, ScaffoldProgress)

    def test_run_start(self) -> None:
        console, out, error_console, _ = _consoles()
        progress = ConsoleScaffoldProgress(console, error_console)

        progress.run_start(1)
        progress.run_start(140)

        assert out.getvalue() == "Creating 1 missing file...\n\nCreating 140 missing files...\n\n"

    def test_created_and_skipped_go_to_stdout(self) -> None:
        console, out, error_console, err = _consoles()
        progress = ConsoleScaffoldProgress(console, error_console)

        progress.directory_created("guides")
        progress.item_done(
            WriteResult(path="guides/x", target=Path("guides/x.mdx"), category="guides", outcome=WriteOutcome.CREATED)
        )
        progress.item_done(
            WriteResult(path="guides/y", target=Path("guides/y.mdx"), category="guides", outcome=WriteOutcome.SKIPPED)
        )

        assert out.getvalue() == (
            "  mkdir    guides\n"
            "  created  guides/x.mdx\n"
            "  skipped  guides/y.mdx (already exists)\n"
        )
        assert err.getvalue() == ""

    def test_errors_go_to_stderr_with_message(self) -> None:
        console, out, error_console, err = _consoles()
        progress = ConsoleScaffoldProgress(console, error_console)

        progress.item_done(
            WriteResult(
                path="guides/x",
                target=Path("guides/x.mdx"),
                category="guides",
                outcome=WriteOutcome.ERROR,
                error="[Errno 28] No space left on device",
            )
        )

        assert out.getvalue() == ""
        assert err.getvalue() == "  error    guides/x: [Errno 28] No space left on device\n"
