"""Exception hierarchy for mdxscaffold."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base exception for all mdxscaffold errors."""


class ConfigError(ScaffoldError):
    """Configuration loading or validation failure."""


class ManifestError(ScaffoldError):
    """A path entry in the page manifest is malformed."""


class TemplateNotFoundError(ScaffoldError):
    """No template is registered for the requested category."""

    def __init__(self, category: str) -> None:
        super().__init__(f"no template registered for category: {category}")
        self.category = category
