"""Tutorial source discovery."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence

from .models import TutorialSource


def file_list(full_dir: Path, relative_dir: Path | str, extension: str) -> List[str]:
    """Return sorted entries of ``full_dir`` ending in ``extension``, joined onto ``relative_dir``.

    The listing is not recursive. ``OSError`` from reading the directory propagates.
    """
    names = sorted(os.listdir(full_dir))
    return [
        os.path.join(str(relative_dir), name)
        for name in names
        if name.endswith(extension)
    ]


def discover_tutorials(
    tutorial_dir: Path, subdirs: Sequence[str], extension: str = ".py"
) -> List[TutorialSource]:
    """List literate sources for every category, in category order then name order."""
    sources: List[TutorialSource] = []
    for category in subdirs:
        directory = tutorial_dir / category
        for entry in file_list(directory, directory, extension):
            sources.append(TutorialSource(path=Path(entry), category=category))
    return sources


__all__ = ["discover_tutorials", "file_list"]
