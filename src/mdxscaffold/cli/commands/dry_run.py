"""Dry-run command formatting."""

from __future__ import annotations

from mdxscaffold import MdxScaffold, PlannedDocument, ScaffoldConfig


def format_dry_run(planned: list[PlannedDocument]) -> str:
    lines = ["Dry run - files that would be created:"]
    lines.extend(f"{doc.index}. {doc.filename} ({doc.category})" for doc in planned)
    lines.append("")
    lines.append(f"Total: {len(planned)} files")
    return "\n".join(lines)


def run_dry_run(config: ScaffoldConfig) -> list[PlannedDocument]:
    import mdxscaffold.cli as cli

    planned = MdxScaffold.from_config(config).plan()
    print(cli._format_dry_run(planned))
    return planned


__all__ = ["format_dry_run", "run_dry_run"]
