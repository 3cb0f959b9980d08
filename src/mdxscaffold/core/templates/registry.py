"""Category -> template lookup."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType

from mdxscaffold.core.contracts.exceptions import TemplateNotFoundError

Template = Callable[[str], str]


class TemplateRegistry(Mapping[str, Template]):
    """Read-only mapping from category key to page template.

    A template takes the derived page title and returns the full page body.
    """

    def __init__(self, templates: Mapping[str, Template]) -> None:
        self._templates = MappingProxyType(dict(templates))

    def __getitem__(self, category: str) -> Template:
        return self._templates[category]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def render(self, category: str, title: str) -> str:
        try:
            template = self._templates[category]
        except KeyError:
            raise TemplateNotFoundError(category) from None
        return template(title)
