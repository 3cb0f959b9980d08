"""Scaffolding engine."""

from mdxscaffold.core.engine.engine import Scaffolder

__all__ = ["Scaffolder"]
