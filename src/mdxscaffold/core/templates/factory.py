"""Template registry factory."""

from __future__ import annotations

from mdxscaffold.core.templates import complete, starter
from mdxscaffold.core.templates.registry import TemplateRegistry


def create_registry(name: str) -> TemplateRegistry:
    if name == "complete":
        return TemplateRegistry(complete.TEMPLATES)
    if name == "starter":
        return TemplateRegistry(starter.TEMPLATES)
    raise ValueError(f"Unknown template set: {name}")
