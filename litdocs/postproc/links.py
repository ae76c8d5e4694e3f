"""Page-tree validation helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List

from ..models import PageTree


class MissingPageError(RuntimeError):
    """Raised when the page tree references files that do not exist."""

    def __init__(self, missing: List[str]) -> None:
        super().__init__("Page tree references missing files: " + ", ".join(missing))
        self.missing = missing


def iter_page_paths(pages: PageTree) -> Iterator[str]:
    """Yield every page path in the tree, depth first, in order."""
    for entry in pages:
        if isinstance(entry, str):
            yield entry
        elif isinstance(entry, dict):
            for value in entry.values():
                if isinstance(value, str):
                    yield value
                elif isinstance(value, list):
                    yield from iter_page_paths(value)


def _is_external(target: str) -> bool:
    return target.startswith(("http://", "https://", "mailto:"))


class NavValidator:
    """Ensures every page referenced by the tree exists under the docs directory."""

    def issues(self, pages: PageTree, *, root: Path) -> List[str]:
        """Return the referenced paths that are missing on disk."""
        missing: List[str] = []
        for target in iter_page_paths(pages):
            if _is_external(target):
                continue
            cleaned = target.split("#", 1)[0].replace("\\", "/")
            if not cleaned or not (root / cleaned).is_file():
                missing.append(target)
        return missing

    def validate(self, pages: PageTree, *, root: Path) -> None:
        missing = self.issues(pages, root=root)
        if missing:
            raise MissingPageError(missing)


__all__ = ["MissingPageError", "NavValidator", "iter_page_paths"]
