"""Sequential scaffolding engine."""

from __future__ import annotations

import logging
from pathlib import Path

from mdxscaffold.core.contracts.document import PlannedDocument, RunSummary, WriteOutcome, WriteResult
from mdxscaffold.core.contracts.exceptions import ScaffoldError
from mdxscaffold.core.contracts.progress import NullScaffoldProgress, ScaffoldProgress
from mdxscaffold.core.manifest.profiles import Profile
from mdxscaffold.core.naming import derive_title
from mdxscaffold.core.writer import target_path, write_document

_LOG = logging.getLogger(__name__)


class Scaffolder:
    """Walks a profile's manifest and writes missing pages one at a time.

    Paths are processed strictly in manifest order; later paths may share
    parent directories with earlier ones.
    """

    def __init__(
        self,
        profile: Profile,
        *,
        root: Path,
        extension: str = ".mdx",
        progress: ScaffoldProgress | None = None,
    ) -> None:
        self._profile = profile
        self._root = root
        self._extension = extension
        self._progress = progress or NullScaffoldProgress()

    @property
    def profile(self) -> Profile:
        return self._profile

    def plan(self) -> list[PlannedDocument]:
        """Describe every page that a run would consider. Touches nothing on disk."""
        return [
            PlannedDocument(
                index=index,
                path=path,
                filename=f"{path}{self._extension}",
                category=self._profile.category_for(path),
                title=derive_title(path),
            )
            for index, path in enumerate(self._profile.paths, start=1)
        ]

    def render(self, path: str) -> str:
        return self._profile.registry.render(self._profile.category_for(path), derive_title(path))

    def run(self) -> RunSummary:
        """Scaffold every manifest path and return the aggregated counts.

        Filesystem and template failures are recorded per path; the run always
        continues with the next path.
        """
        paths = self._profile.paths
        summary = RunSummary(total=len(paths))
        self._progress.run_start(len(paths))
        _LOG.debug("scaffolding %d pages into %s (profile=%s)", len(paths), self._root, self._profile.name)

        for path in paths:
            result = self._scaffold_one(path)
            summary.record(result)
            self._progress.item_done(result)

        _LOG.debug(
            "run finished: created=%d skipped=%d errors=%d",
            summary.created,
            summary.skipped,
            summary.errors,
        )
        return summary

    def _scaffold_one(self, path: str) -> WriteResult:
        category = self._profile.category_for(path)
        target = target_path(path, root=self._root, extension=self._extension)
        try:
            content = self._profile.registry.render(category, derive_title(path))
            outcome = write_document(
                path,
                content,
                root=self._root,
                extension=self._extension,
                on_directory_created=self._directory_created,
            )
        except (OSError, ScaffoldError) as exc:
            _LOG.debug("failed to scaffold %s: %s", path, exc)
            return WriteResult(path=path, target=target, category=category, outcome=WriteOutcome.ERROR, error=str(exc))
        return WriteResult(path=path, target=target, category=category, outcome=outcome)

    def _directory_created(self, directory: Path) -> None:
        try:
            shown = str(directory.relative_to(self._root))
        except ValueError:
            shown = str(directory)
        self._progress.directory_created(shown)
