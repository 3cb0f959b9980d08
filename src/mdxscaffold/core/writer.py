"""Create-if-absent file writing for scaffolded pages."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from mdxscaffold.core.contracts.document import WriteOutcome

_LOG = logging.getLogger(__name__)


def target_path(path: str, *, root: Path, extension: str = ".mdx") -> Path:
    return root / f"{path}{extension}"


def write_document(
    path: str,
    content: str,
    *,
    root: Path,
    extension: str = ".mdx",
    on_directory_created: Callable[[Path], None] | None = None,
) -> WriteOutcome:
    """Write *content* to ``root/path + extension`` unless the file exists.

    Existing files are never touched. Missing parent directories are created.
    ``OSError`` from directory creation or the write itself propagates to the
    caller.
    """
    target = target_path(path, root=root, extension=extension)
    if target.exists():
        _LOG.debug("skip %s: already exists", target)
        return WriteOutcome.SKIPPED

    directory = target.parent
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        _LOG.info("created directory %s", directory)
        if on_directory_created is not None:
            on_directory_created(directory)

    target.write_text(content, encoding="utf-8")
    _LOG.debug("wrote %s (%d bytes)", target, len(content))
    return WriteOutcome.CREATED
