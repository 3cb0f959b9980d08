from pathlib import Path

import pytest

from mdxscaffold.core.contracts.document import WriteOutcome
from mdxscaffold.core.writer import target_path, write_document


def test_target_path_appends_extension(tmp_path: Path) -> None:
    assert target_path("guides/deployment", root=tmp_path) == tmp_path / "guides" / "deployment.mdx"
    assert target_path("overview", root=tmp_path, extension=".md") == tmp_path / "overview.md"


def test_write_document_creates_file_and_parents(tmp_path: Path) -> None:
    created_dirs: list[Path] = []

    outcome = write_document(
        "sdks/python/installation",
        "body\n",
        root=tmp_path,
        on_directory_created=created_dirs.append,
    )

    assert outcome == WriteOutcome.CREATED
    assert (tmp_path / "sdks" / "python" / "installation.mdx").read_text(encoding="utf-8") == "body\n"
    assert created_dirs == [tmp_path / "sdks" / "python"]


def test_write_document_does_not_report_existing_directory(tmp_path: Path) -> None:
    (tmp_path / "guides").mkdir()
    created_dirs: list[Path] = []

    write_document("guides/monitoring", "x", root=tmp_path, on_directory_created=created_dirs.append)

    assert created_dirs == []


def test_write_document_skips_existing_file(tmp_path: Path) -> None:
    existing = tmp_path / "guides" / "deployment.mdx"
    existing.parent.mkdir()
    existing.write_text("hand written", encoding="utf-8")

    outcome = write_document("guides/deployment", "generated", root=tmp_path)

    assert outcome == WriteOutcome.SKIPPED
    assert existing.read_text(encoding="utf-8") == "hand written"


def test_write_document_single_segment_path(tmp_path: Path) -> None:
    assert write_document("overview", "x", root=tmp_path) == WriteOutcome.CREATED
    assert (tmp_path / "overview.mdx").is_file()


def test_write_document_propagates_os_error(tmp_path: Path) -> None:
    (tmp_path / "guides").write_text("not a directory", encoding="utf-8")

    with pytest.raises(OSError):
        write_document("guides/deployment", "x", root=tmp_path)
