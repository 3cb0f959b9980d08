from pathlib import Path

import pytest

from mdxscaffold.core.contracts.config import ScaffoldConfig
from mdxscaffold.core.contracts.document import validate_path_entry
from mdxscaffold.core.contracts.exceptions import ConfigError
from mdxscaffold.core.manifest import COMPLETE_PATHS, STARTER_PATHS, build_profile, get_profile


@pytest.mark.parametrize(("paths", "count"), [(COMPLETE_PATHS, 140), (STARTER_PATHS, 40)])
def test_builtin_manifests_are_valid_and_unique(paths: tuple[str, ...], count: int) -> None:
    assert len(paths) == count
    assert len(set(paths)) == count
    for path in paths:
        assert validate_path_entry(path) == path
        assert not path.endswith(".mdx")


@pytest.mark.parametrize("name", ["complete", "starter"])
def test_builtin_profiles_reference_only_registered_categories(name: str) -> None:
    profile = get_profile(name)

    assert profile.missing_categories() == []
    for path in profile.paths:
        assert profile.category_for(path) in profile.registry


def test_get_profile_unknown_name() -> None:
    with pytest.raises(ConfigError, match="unknown profile: other"):
        get_profile("other")


@pytest.mark.parametrize(
    ("path", "category"),
    [
        ("api-reference/auth/mfa", "api-reference"),
        ("business/roi-analysis", "business"),
        ("security-practices/code-review", "security"),
        ("platform-overview", "getting-started"),
        ("somewhere/else", "guides"),
    ],
)
def test_complete_profile_categories(path: str, category: str) -> None:
    assert get_profile("complete").category_for(path) == category


@pytest.mark.parametrize(
    ("path", "category"),
    [
        ("api-reference/payments/status", "api"),
        ("sdks/python/quickstart", "sdk"),
        ("resources/glossary", "resource"),
        ("guides/deployment", "guide"),
        ("business/roi-analysis", "guide"),
    ],
)
def test_starter_profile_categories(path: str, category: str) -> None:
    assert get_profile("starter").category_for(path) == category


def test_build_profile_applies_overrides() -> None:
    config = ScaffoldConfig(
        profile="starter",
        paths=["a/b-c", "a/d", "how-to/x"],
        sections={"a": "guide", "how-to": "resource"},
        default_category="api",
        output_dir=Path("docs"),
    )

    profile = build_profile(config)

    assert profile.paths == ("a/b-c", "a/d", "how-to/x")
    assert profile.category_for("a/d") == "guide"
    assert profile.category_for("how-to/x") == "resource"
    assert profile.category_for("sdks/overview") == "sdk"
    assert profile.category_for("elsewhere") == "api"


def test_build_profile_without_overrides_matches_builtin() -> None:
    profile = build_profile(ScaffoldConfig())

    assert profile.paths == COMPLETE_PATHS
    assert profile.default_category == "guides"


def test_build_profile_rejects_unknown_categories() -> None:
    config = ScaffoldConfig(profile="starter", sections={"a": "nope"}, default_category="also-nope")

    with pytest.raises(ConfigError, match="unknown template categories: also-nope, nope"):
        build_profile(config)
