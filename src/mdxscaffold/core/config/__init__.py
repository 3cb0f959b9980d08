"""Core configuration loading exports."""

from mdxscaffold.core.config.loader import load_config

__all__ = ["load_config"]
