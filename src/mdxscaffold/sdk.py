"""SDK composition root for mdxscaffold."""

from __future__ import annotations

from pathlib import Path

from mdxscaffold.core.contracts.config import ScaffoldConfig
from mdxscaffold.core.contracts.document import PlannedDocument, RunSummary
from mdxscaffold.core.contracts.progress import ScaffoldProgress
from mdxscaffold.core.engine import Scaffolder
from mdxscaffold.core.manifest.profiles import Profile, build_profile


class MdxScaffold:
    """Library entry point: build from a config, then ``plan()`` or ``run()``.

    Example::

        scaffold = MdxScaffold.from_config(ScaffoldConfig(profile="starter"))
        summary = scaffold.run()
    """

    def __init__(self, *, config: ScaffoldConfig, profile: Profile, progress: ScaffoldProgress | None = None) -> None:
        self._config = config
        self._profile = profile
        self._scaffolder = Scaffolder(
            profile,
            root=Path(config.output_dir),
            extension=config.extension,
            progress=progress,
        )

    @classmethod
    def from_config(cls, config: ScaffoldConfig, *, progress: ScaffoldProgress | None = None) -> MdxScaffold:
        return cls(config=config, profile=build_profile(config), progress=progress)

    @property
    def config(self) -> ScaffoldConfig:
        return self._config

    @property
    def profile(self) -> Profile:
        return self._profile

    def plan(self) -> list[PlannedDocument]:
        return self._scaffolder.plan()

    def render(self, path: str) -> str:
        return self._scaffolder.render(path)

    def run(self) -> RunSummary:
        return self._scaffolder.run()
