"""Page templates and the registry that selects them."""

from mdxscaffold.core.templates.factory import create_registry
from mdxscaffold.core.templates.registry import Template, TemplateRegistry

__all__ = ["Template", "TemplateRegistry", "create_registry"]
