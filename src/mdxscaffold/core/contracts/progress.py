"""Progress reporting protocol for the scaffolding loop.

The engine emits one event per path; consumers (e.g. the CLI console
reporter) implement ``ScaffoldProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from mdxscaffold.core.contracts.document import WriteResult


class ScaffoldProgress(ABC):
    """Observer interface for scaffolding progress events."""

    @abstractmethod
    def run_start(self, total: int) -> None:
        """A run over *total* paths is starting."""
        ...  # pragma: no cover

    @abstractmethod
    def directory_created(self, directory: str) -> None:
        """A missing parent directory was created."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, result: WriteResult) -> None:
        """One path has been processed, successfully or not."""
        ...  # pragma: no cover


class NullScaffoldProgress(ScaffoldProgress):
    """No-op implementation used when no progress display is requested."""

    def run_start(self, total: int) -> None:
        pass

    def directory_created(self, directory: str) -> None:
        pass

    def item_done(self, result: WriteResult) -> None:
        pass
