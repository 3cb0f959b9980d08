"""Generate command formatting."""

from __future__ import annotations

from mdxscaffold import MdxScaffold, RunSummary, ScaffoldConfig
from mdxscaffold.cli.progress.console import ConsoleScaffoldProgress

NEXT_STEPS = (
    "Run: mintlify dev",
    "Replace placeholder content with actual documentation",
    "Follow Mintlify best practices (no < > in tables, cols={2})",
    "Test your documentation build",
)


def _files(count: int) -> str:
    return f"{count} file{'s' if count != 1 else ''}"


def format_generate_summary(summary: RunSummary, config: ScaffoldConfig) -> str:
    lines = [
        "",
        "mdxscaffold - generate complete",
        "",
        f"  Profile:   {config.profile}",
        f"  Output:    {config.output_dir}",
        "",
        f"  Created:   {_files(summary.created)}",
        f"  Skipped:   {_files(summary.skipped)}",
        f"  Errors:    {summary.errors}",
        f"  Total:     {_files(summary.total)}",
    ]

    if summary.created > 0:
        lines.append("")
        lines.append("  Next steps:")
        lines.extend(f"    {number}. {step}" for number, step in enumerate(NEXT_STEPS, start=1))
    elif summary.errors == 0:
        lines.append("")
        lines.append("  Status:    all pages already exist")

    if summary.errors > 0:
        lines.append("")
        lines.append("  Some files failed to create. Check the error messages above.")

    lines.append("")
    return "\n".join(lines)


def run_generate(config: ScaffoldConfig) -> RunSummary:
    import mdxscaffold.cli as cli

    scaffold = MdxScaffold.from_config(config, progress=ConsoleScaffoldProgress())
    print(f"mdxscaffold - {scaffold.profile.name} profile")
    summary = scaffold.run()

    print(cli._format_generate_summary(summary, config))
    return summary


__all__ = ["format_generate_summary", "run_generate"]
