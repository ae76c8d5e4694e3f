"""Page-tree assembly."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from .config import LitDocsConfig
from .constants import TUTORIALS_MARKER
from .discovery import file_list
from .logging import get_logger
from .models import PageTree


def tutorial_section(tutorial_dir: Path, subdirs: Sequence[str], *, prefix: str) -> PageTree:
    """One ``{category: [pages]}`` entry per subdirectory, pages sorted by name."""
    section: PageTree = []
    for subdir in subdirs:
        relative = f"{prefix}/{subdir}" if prefix else subdir
        pages = [path.replace("\\", "/") for path in file_list(tutorial_dir / subdir, relative, ".md")]
        section.append({subdir: pages})
    return section


class PageTreeBuilder:
    """Expands the configured page tree with the tutorials found on disk."""

    def __init__(self) -> None:
        self.logger = get_logger("nav")

    def build(self, config: LitDocsConfig) -> PageTree:
        tutorials = tutorial_section(
            config.tutorial_path,
            config.tutorials.subdirs,
            prefix=config.tutorials.dir.strip("/"),
        )
        pages = self._expand(config.pages, tutorials)
        self.logger.debug(
            "Tutorials section lists %d pages",
            sum(len(next(iter(entry.values()))) for entry in tutorials),
        )
        return pages

    def _expand(self, entries: Sequence[Any], tutorials: PageTree) -> PageTree:
        expanded: PageTree = []
        for entry in entries:
            if entry == TUTORIALS_MARKER:
                expanded.extend(tutorials)
            elif isinstance(entry, dict):
                expanded.append({title: self._expand_value(value, tutorials) for title, value in entry.items()})
            else:
                expanded.append(entry)
        return expanded

    def _expand_value(self, value: Any, tutorials: PageTree) -> Any:
        if value == TUTORIALS_MARKER:
            return list(tutorials)
        if isinstance(value, list):
            return self._expand(value, tutorials)
        return value


__all__ = ["PageTreeBuilder", "tutorial_section"]
