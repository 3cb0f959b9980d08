"""Core contracts-domain exports."""

from mdxscaffold.core.contracts.config import ProfileName, ScaffoldConfig
from mdxscaffold.core.contracts.document import (
    PlannedDocument,
    RunSummary,
    WriteOutcome,
    WriteResult,
    validate_path_entry,
)
from mdxscaffold.core.contracts.exceptions import ConfigError, ManifestError, ScaffoldError, TemplateNotFoundError
from mdxscaffold.core.contracts.progress import NullScaffoldProgress, ScaffoldProgress

__all__ = [
    "ConfigError",
    "ManifestError",
    "NullScaffoldProgress",
    "PlannedDocument",
    "ProfileName",
    "RunSummary",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldProgress",
    "TemplateNotFoundError",
    "WriteOutcome",
    "WriteResult",
    "validate_path_entry",
]
