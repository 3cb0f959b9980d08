"""Shared test fixtures for mdxscaffold tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mdxscaffold.core.manifest.profiles import Profile
from mdxscaffold.core.templates import TemplateRegistry, create_registry


@pytest.fixture
def tiny_profile() -> Profile:
    """Two pages under ``a/``, both mapped to the starter ``guide`` template."""
    registry = create_registry("starter")
    return Profile(
        name="tiny",
        paths=("a/b-c", "a/d"),
        sections={"a": "guide"},
        default_category="guide",
        registry=registry,
    )


@pytest.fixture
def echo_registry() -> TemplateRegistry:
    return TemplateRegistry({"echo": lambda title: f"# {title}\n"})


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(root)): (path.read_bytes() if path.is_file() else b"")
        for path in sorted(root.rglob("*"))
    }


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, bytes]]:
    """Map every file under a root to its bytes, and every directory to ``b""``."""
    return _snapshot
