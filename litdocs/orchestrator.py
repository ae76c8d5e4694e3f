"""Pipeline orchestration for the build and deploy commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

from .config import LitDocsConfig, load_config
from .constants import GENERATED_CONFIG_FILENAME
from .doctests import DoctestRunner
from .external import ExternalDocs
from .generator.builder import SiteBuilder
from .generator.deploy import Deployer
from .logging import get_logger
from .models import BuildOutcome
from .nav import PageTreeBuilder
from .postproc.links import NavValidator
from .tutorials import TutorialBuilder


class Orchestrator:
    """Runs discovery, tutorial regeneration, page-tree assembly and site generation."""

    def __init__(
        self,
        tutorial_builder: TutorialBuilder | None = None,
        page_tree_builder: PageTreeBuilder | None = None,
        nav_validator: NavValidator | None = None,
        doctest_runner: DoctestRunner | None = None,
        site_builder: SiteBuilder | None = None,
        deployer: Deployer | None = None,
        external_factory: Callable[[LitDocsConfig], ExternalDocs] | None = None,
    ) -> None:
        self.tutorial_builder = tutorial_builder or TutorialBuilder()
        self.page_tree_builder = page_tree_builder or PageTreeBuilder()
        self.nav_validator = nav_validator or NavValidator()
        self.doctest_runner = doctest_runner or DoctestRunner()
        self.site_builder = site_builder or SiteBuilder()
        self.deployer = deployer or Deployer()
        self._external_factory = external_factory or ExternalDocs
        self.logger = get_logger("orchestrator")

    def run_build(self, path: str, *, fast: bool = False) -> BuildOutcome:
        """Build the documentation site rooted at ``path``.

        With ``fast`` the tutorials are neither executed nor regenerated and
        embedded examples are not verified; whatever pages are already on disk
        are used.
        """
        root = Path(path).expanduser().resolve()
        config = load_config(root)
        self.logger.info("Starting build for %s%s", config.root, " (fast)" if fast else "")

        tutorials: List[Path] = []
        if fast:
            self.logger.info("Skipping tutorial regeneration")
        else:
            tutorials = self.tutorial_builder.build(config)

        pages = self.page_tree_builder.build(config)

        external = self._external_factory(config)
        external.clean()
        if config.external.enabled:
            pages.append(external.add_pages())

        self.nav_validator.validate(pages, root=config.docs_path)

        if fast or not config.doctest.enabled:
            self.logger.info("Skipping doctests")
        else:
            excluded = [] if config.doctest.include_external else [config.external.target]
            self.doctest_runner.run(config.docs_path, pages, exclude_prefixes=excluded)

        site_dir = self.site_builder.build(config, pages)
        self.logger.info("Site written to %s", site_dir)
        return BuildOutcome(
            site_dir=site_dir,
            pages=pages,
            tutorials=tutorials,
            external_included=config.external.enabled,
            fast=fast,
        )

    def run_deploy(self, path: str) -> BuildOutcome:
        """Run a full build, then publish it with ``mkdocs gh-deploy``."""
        outcome = self.run_build(path)
        config = load_config(Path(path).expanduser().resolve())
        self.deployer.deploy(config, config.root / GENERATED_CONFIG_FILENAME)
        return outcome
