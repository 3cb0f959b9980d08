"""Named scaffolding profiles and config-driven profile assembly."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from mdxscaffold.core.contracts.config import ScaffoldConfig
from mdxscaffold.core.contracts.exceptions import ConfigError
from mdxscaffold.core.manifest.paths import COMPLETE_PATHS, STARTER_PATHS
from mdxscaffold.core.naming import resolve_category
from mdxscaffold.core.templates import TemplateRegistry, create_registry

COMPLETE_SECTIONS: Mapping[str, str] = MappingProxyType(
    {
        "platform-overview": "getting-started",
        "target-users": "getting-started",
        "key-features": "getting-started",
        "market-context": "getting-started",
        "quick-setup": "quick-setup",
        "architecture": "architecture",
        "data-models": "data-models",
        "core-features": "core-features",
        "advanced-features": "advanced-features",
        "development": "development",
        "testing": "testing",
        "api-reference": "api-reference",
        "integration": "integration",
        "security": "security",
        "security-practices": "security",
        "deployment": "deployment",
        "infrastructure": "infrastructure",
        "guides": "guides",
        "business": "business",
        "compliance": "compliance",
        "resources": "resources",
    }
)

STARTER_SECTIONS: Mapping[str, str] = MappingProxyType(
    {
        "api-reference": "api",
        "guides": "guide",
        "sdks": "sdk",
        "resources": "resource",
    }
)


@dataclass(frozen=True)
class Profile:
    """Everything needed to scaffold one documentation tree."""

    name: str
    paths: tuple[str, ...]
    sections: Mapping[str, str]
    default_category: str
    registry: TemplateRegistry = field(repr=False)

    def category_for(self, path: str) -> str:
        return resolve_category(path, self.sections, self.default_category)

    def missing_categories(self) -> list[str]:
        """Categories the section table or default refer to but the registry lacks."""
        referenced = {*self.sections.values(), self.default_category}
        return sorted(category for category in referenced if category not in self.registry)


_BUILTIN = {
    "complete": (COMPLETE_PATHS, COMPLETE_SECTIONS, "guides"),
    "starter": (STARTER_PATHS, STARTER_SECTIONS, "guide"),
}


def get_profile(name: str) -> Profile:
    try:
        paths, sections, default = _BUILTIN[name]
    except KeyError:
        raise ConfigError(f"unknown profile: {name}") from None
    return Profile(
        name=name,
        paths=paths,
        sections=sections,
        default_category=default,
        registry=create_registry(name),
    )


def build_profile(config: ScaffoldConfig) -> Profile:
    """Apply config overrides on top of the named built-in profile.

    Raises:
        ConfigError: If the resulting profile refers to unknown categories.
    """
    base = get_profile(config.profile)
    sections = MappingProxyType({**base.sections, **config.sections})
    profile = Profile(
        name=base.name,
        paths=tuple(config.paths) if config.paths is not None else base.paths,
        sections=sections,
        default_category=config.default_category or base.default_category,
        registry=base.registry,
    )
    missing = profile.missing_categories()
    if missing:
        known = ", ".join(sorted(profile.registry))
        raise ConfigError(f"unknown template categories: {', '.join(missing)} (known: {known})")
    return profile
