"""Title and category derivation for manifest paths."""

from __future__ import annotations

import re
from collections.abc import Mapping

_WHITESPACE_RE = re.compile(r"\s+")


def leading_segment(path: str) -> str:
    """Return the text before the first ``/``, or the whole path."""
    return path.split("/", 1)[0]


def resolve_category(path: str, section_map: Mapping[str, str], default: str) -> str:
    """Map *path* to a template category by its leading segment.

    Unmapped segments fall back to *default*; this never raises.
    """
    return section_map.get(leading_segment(path), default)


def derive_title(path: str) -> str:
    """Turn the last segment of *path* into a display title.

    ``"core-features/mobile-money"`` becomes ``"Mobile Money"``. Only the first
    character of each hyphen-separated word is upper-cased.
    """
    filename = path.rsplit("/", 1)[-1]
    return " ".join(word[:1].upper() + word[1:] for word in filename.split("-"))


def slug(title: str) -> str:
    """``"Mobile Money"`` -> ``"mobile-money"``."""
    return _WHITESPACE_RE.sub("-", title.lower())


def compact(title: str) -> str:
    """``"Mobile Money"`` -> ``"mobilemoney"``."""
    return _WHITESPACE_RE.sub("", title.lower())


def identifier(title: str) -> str:
    """``"Mobile Money"`` -> ``"MobileMoney"``."""
    return _WHITESPACE_RE.sub("", title)
