"""Document and run-result contracts."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field

from mdxscaffold.core.contracts.exceptions import ManifestError


class WriteOutcome(StrEnum):
    CREATED = "created"
    SKIPPED = "skipped"
    ERROR = "error"


def validate_path_entry(path: str) -> str:
    """Check that *path* is a usable manifest entry and return it unchanged.

    Entries are slash-separated, relative and extension-less
    (``"api-reference/auth/mfa"``).

    Raises:
        ManifestError: If the entry is empty, absolute, or has an empty, ``.`` or
            ``..`` segment.
    """
    if not path or not path.strip():
        raise ManifestError("path entry must be non-empty")
    if path.startswith("/"):
        raise ManifestError(f"path entry must be relative: {path}")
    if any(not segment for segment in path.split("/")):
        raise ManifestError(f"path entry has an empty segment: {path}")
    if any(segment in (".", "..") for segment in path.split("/")):
        raise ManifestError(f"path entry must not contain relative segments: {path}")
    return path


class PlannedDocument(BaseModel):
    index: int
    path: str
    filename: str
    category: str
    title: str


class WriteResult(BaseModel):
    path: str
    target: Path
    category: str
    outcome: WriteOutcome
    error: str | None = None


class RunSummary(BaseModel):
    """Aggregated outcome counts for one generation run."""

    created: int = 0
    skipped: int = 0
    errors: int = 0
    total: int = 0
    results: list[WriteResult] = Field(default_factory=list)

    @property
    def failed(self) -> list[WriteResult]:
        return [result for result in self.results if result.outcome == WriteOutcome.ERROR]

    def record(self, result: WriteResult) -> None:
        self.results.append(result)
        if result.outcome == WriteOutcome.CREATED:
            self.created += 1
        elif result.outcome == WriteOutcome.SKIPPED:
            self.skipped += 1
        else:
            self.errors += 1
