"""MDX rendering helpers."""

from mdxscaffold.core.rendering.components import document

__all__ = ["document"]
