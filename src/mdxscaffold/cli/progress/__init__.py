from mdxscaffold.cli.progress.console import ConsoleScaffoldProgress

__all__ = ["ConsoleScaffoldProgress"]
