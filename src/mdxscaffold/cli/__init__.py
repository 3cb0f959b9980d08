"""Command-line interface for mdxscaffold."""

from __future__ import annotations

import argparse
import logging as logging
from pathlib import Path

from mdxscaffold import ScaffoldConfig
from mdxscaffold import load_config as load_config
from mdxscaffold.cli.app import main as main
from mdxscaffold.cli.commands import dry_run as dry_run_command
from mdxscaffold.cli.commands import generate as generate_command
from mdxscaffold.cli.parser import build_parser as build_parser

_format_generate_summary = generate_command.format_generate_summary
_format_dry_run = dry_run_command.format_dry_run

_run_generate = generate_command.run_generate
_run_dry_run = dry_run_command.run_dry_run


def resolve_config(args: argparse.Namespace) -> ScaffoldConfig:
    """Build the run config from ``--config`` (if any) plus command-line overrides."""
    config = load_config(args.config) if args.config else ScaffoldConfig()

    overrides: dict[str, object] = {}
    if args.profile is not None:
        overrides["profile"] = args.profile
    if args.output_dir is not None:
        overrides["output_dir"] = Path(args.output_dir)
    if overrides:
        config = config.model_copy(update=overrides)
    return config
