"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys
import traceback

from mdxscaffold import ConfigError, ManifestError, ScaffoldError

_HELP_FLAGS = ("-h", "--help")


def main(argv: list[str] | None = None) -> int:
    import mdxscaffold.cli as cli

    parser = cli.build_parser()
    raw_args = sys.argv[1:] if argv is None else argv
    # Help wins over any other flag, including ones argparse would reject.
    if any(arg in _HELP_FLAGS for arg in raw_args):
        parser.parse_args(["--help"])
    args = parser.parse_args(raw_args)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        config = cli.resolve_config(args)
        if args.dry_run:
            cli._run_dry_run(config)
        else:
            cli._run_generate(config)
        return 0
    except (ConfigError, ManifestError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:
        if args.verbose:
            traceback.print_exc()
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
