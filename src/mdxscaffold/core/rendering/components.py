"""Reusable MDX building blocks for page templates.

Every helper returns a block without a trailing newline; templates join
blocks with blank lines via :func:`document`.
"""

from __future__ import annotations

from collections.abc import Iterable


def _indent(text: str, prefix: str = "  ") -> str:
    return "\n".join(f"{prefix}{line}" if line else line for line in text.splitlines())


def front_matter(title: str, description: str) -> str:
    return f'---\ntitle: "{title}"\ndescription: "{description}"\n---'


def heading(text: str, level: int = 2) -> str:
    return f"{'#' * level} {text}"


def section(title: str, *blocks: str) -> str:
    """Render a ``##`` heading followed by its body blocks."""
    return "\n\n".join([heading(title), *blocks])


def callout(kind: str, text: str) -> str:
    """Render an admonition such as ``<Info>`` or ``<Warning>``."""
    return f"<{kind}>\n{text}\n</{kind}>"


def info(text: str) -> str:
    return callout("Info", text)


def warning(text: str) -> str:
    return callout("Warning", text)


def accordion(title: str, text: str) -> str:
    return f'<Accordion title="{title}">\n{text}\n</Accordion>'


def card(title: str, text: str, *, icon: str | None = None, href: str | None = None) -> str:
    attrs = f'title="{title}"'
    if icon:
        attrs += f' icon="{icon}"'
    if href:
        attrs += f' href="{href}"'
    return f"<Card {attrs}>\n  {text}\n</Card>"


def card_group(cards: Iterable[str], cols: int = 2) -> str:
    body = "\n".join(_indent(c) for c in cards)
    return f"<CardGroup cols={{{cols}}}>\n{body}\n</CardGroup>"


def steps(items: Iterable[tuple[str, str]]) -> str:
    """Render a ``<Steps>`` block from ``(title, text)`` pairs."""
    body = "\n".join(f'  <Step title="{title}">\n    {text}\n  </Step>' for title, text in items)
    return f"<Steps>\n{body}\n</Steps>"


def code_block(language: str, code: str) -> str:
    return f"```{language}\n{code}\n```"


def code_group(blocks: Iterable[str]) -> str:
    return "<CodeGroup>\n" + "\n\n".join(blocks) + "\n</CodeGroup>"


def bullets(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def document(title: str, description: str, *sections: str) -> str:
    """Assemble a full page: front-matter, ``#`` title, then *sections*."""
    return "\n\n".join([front_matter(title, description), heading(title, level=1), *sections]) + "\n"
