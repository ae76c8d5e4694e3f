"""Regenerate tutorial pages from literate sources."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, List, Optional, Sequence
from urllib.parse import quote

from .config import LitDocsConfig
from .discovery import discover_tutorials, file_list
from .literate import markdown
from .logging import get_logger
from .models import TutorialSource
from .postproc.footer import link_example
from .sandbox import include_sandbox

EditUrlResolver = Callable[[Path], str]


def edit_url_resolver(config: LitDocsConfig) -> EditUrlResolver:
    """Return a function mapping a tutorial source to its "view source" URL.

    With ``site.repo_url`` configured the URL points at the file on the
    configured branch; otherwise it is the file name, which resolves next to
    the generated page.
    """
    repo_url = config.site.repo_url
    branch = config.site.edit_branch
    repo_root = config.repo_root_path

    def resolve(path: Path) -> str:
        if not repo_url:
            return path.name
        try:
            relative = path.resolve().relative_to(repo_root).as_posix()
        except ValueError:
            relative = path.name
        return f"{repo_url}/blob/{branch}/{quote(relative)}"

    return resolve


class TutorialBuilder:
    """Executes each tutorial as a smoke test, then converts it to markdown."""

    def __init__(
        self,
        executor: Callable[[Path], object] | None = None,
        converter: Callable[..., Path] | None = None,
    ) -> None:
        self._executor = executor or include_sandbox
        self._converter = converter or markdown
        self.logger = get_logger("tutorials")

    def literate_directory(
        self,
        directory: Path,
        *,
        edit_url_for: EditUrlResolver,
        extension: str = ".py",
        sources: Optional[Sequence[TutorialSource]] = None,
    ) -> List[Path]:
        """Rebuild every page in ``directory`` and return the generated paths.

        ``sources`` defaults to the ``extension`` files found in ``directory``;
        :meth:`build` passes the category's already discovered tutorials.
        """
        if sources is None:
            sources = discover_tutorials(directory.parent, [directory.name], extension)

        for stale in file_list(directory, directory, ".md"):
            os.remove(stale)

        generated: List[Path] = []
        for tutorial in sources:
            # Executed before conversion so ``#src`` lines still run.
            self.logger.info("Testing %s", tutorial.path)
            self._executor(tutorial.path)
            page = self._converter(
                tutorial.path,
                tutorial.markdown_path.parent,
                edit_url=edit_url_for(tutorial.path),
                postprocess=link_example,
            )
            generated.append(Path(page))
        return generated

    def build(self, config: LitDocsConfig, *, edit_url_for: Optional[EditUrlResolver] = None) -> List[Path]:
        """Regenerate pages for every configured tutorial category."""
        resolver = edit_url_for or edit_url_resolver(config)
        subdirs = config.tutorials.subdirs
        discovered = discover_tutorials(config.tutorial_path, subdirs, config.tutorials.extension)
        self.logger.debug("Discovered %d tutorial sources", len(discovered))

        generated: List[Path] = []
        for category in subdirs:
            generated.extend(
                self.literate_directory(
                    config.tutorial_path / category,
                    edit_url_for=resolver,
                    sources=[tutorial for tutorial in discovered if tutorial.category == category],
                )
            )
        self.logger.info("Regenerated %d tutorial pages", len(generated))
        return generated


__all__ = ["TutorialBuilder", "edit_url_resolver"]
