from pathlib import Path

import pytest

from mdxscaffold import ConfigError, MdxScaffold, ScaffoldConfig, WriteOutcome


def test_from_config_runs_starter_profile(tmp_path: Path) -> None:
    scaffold = MdxScaffold.from_config(ScaffoldConfig(profile="starter", output_dir=tmp_path))

    summary = scaffold.run()

    assert scaffold.profile.name == "starter"
    assert summary.created == summary.total == 40
    assert all(result.outcome == WriteOutcome.CREATED for result in summary.results)
    assert (tmp_path / "guides" / "deployment.mdx").read_text(encoding="utf-8") == scaffold.render(
        "guides/deployment"
    )


def test_plan_reports_extension_from_config(tmp_path: Path) -> None:
    scaffold = MdxScaffold.from_config(ScaffoldConfig(paths=["overview"], extension=".md", output_dir=tmp_path))

    [doc] = scaffold.plan()

    assert (doc.filename, doc.category, doc.title) == ("overview.md", "guides", "Overview")
    assert list(tmp_path.iterdir()) == []


def test_from_config_rejects_unknown_default_category() -> None:
    with pytest.raises(ConfigError):
        MdxScaffold.from_config(ScaffoldConfig(default_category="nope"))
