"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

_DESCRIPTION = "Create placeholder MDX pages for every documentation path that does not exist yet."

_EPILOG = """\
profiles:
  complete  140+ pages with section-specific templates (API reference,
            guides, architecture, security, business, compliance, ...)
  starter   40 pages with minimal API, guide, SDK and resource templates

Existing files are never overwritten; missing directories are created.
Pages are written relative to the current directory unless --output-dir
or an output_dir in --config says otherwise.
"""


def _package_version() -> str:
    try:
        return version("mdxscaffold")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdxscaffold",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be created and their template category, then exit",
    )
    parser.add_argument(
        "--profile",
        choices=["complete", "starter"],
        default=None,
        help="Page manifest and template set to use (default: complete)",
    )
    parser.add_argument("--config", default=None, help="Path to an mdxscaffold JSON config file")
    parser.add_argument("--output-dir", "-o", default=None, help="Directory to write pages into (default: cwd)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
