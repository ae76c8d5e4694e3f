"""Core data models shared across litdocs components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union

# A page tree is the MkDocs ``nav`` shape: each entry is either a page path or
# a single-key mapping from a section title to a path or a nested tree.
PageEntry = Union[str, Dict[str, Union[str, "PageTree"]]]
PageTree = List[PageEntry]


@dataclass
class TutorialSource:
    """A literate tutorial file and the category directory it lives in."""

    path: Path
    category: str

    @property
    def markdown_path(self) -> Path:
        return self.path.with_suffix(".md")


@dataclass
class BuildOutcome:
    """Result of a documentation build."""

    site_dir: Path
    pages: PageTree
    tutorials: List[Path] = field(default_factory=list)
    external_included: bool = False
    fast: bool = False
