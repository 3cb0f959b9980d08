"""Public API surface for mdxscaffold."""

__version__ = "1.0.0"

from mdxscaffold.core.config import load_config
from mdxscaffold.core.contracts import (
    ConfigError,
    ManifestError,
    NullScaffoldProgress,
    PlannedDocument,
    RunSummary,
    ScaffoldConfig,
    ScaffoldError,
    ScaffoldProgress,
    TemplateNotFoundError,
    WriteOutcome,
    WriteResult,
    validate_path_entry,
)
from mdxscaffold.core.engine import Scaffolder
from mdxscaffold.core.manifest import COMPLETE_PATHS, STARTER_PATHS, Profile, build_profile, get_profile
from mdxscaffold.core.naming import derive_title, resolve_category
from mdxscaffold.core.templates import TemplateRegistry, create_registry
from mdxscaffold.core.writer import write_document
from mdxscaffold.sdk import MdxScaffold

__all__ = [
    "COMPLETE_PATHS",
    "STARTER_PATHS",
    "ConfigError",
    "ManifestError",
    "MdxScaffold",
    "NullScaffoldProgress",
    "PlannedDocument",
    "Profile",
    "RunSummary",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldProgress",
    "Scaffolder",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "WriteOutcome",
    "WriteResult",
    "__version__",
    "build_profile",
    "create_registry",
    "derive_title",
    "get_profile",
    "load_config",
    "resolve_category",
    "validate_path_entry",
    "write_document",
]
