"""Static-site generation through MkDocs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

import yaml
from mkdocs.commands.build import build as mkdocs_build
from mkdocs.config import load_config as load_mkdocs_config
from mkdocs.exceptions import MkDocsException

from ..config import LitDocsConfig
from ..constants import GENERATED_CONFIG_FILENAME
from ..logging import get_logger
from ..models import PageTree

PRETTY_URLS_ENV = "CI"
MARKDOWN_EXTENSIONS = ["admonition", "attr_list", "fenced_code", "tables", "toc"]


class SiteBuildError(RuntimeError):
    """Raised when MkDocs refuses the configuration or aborts the build."""


def pretty_urls(environ: Mapping[str, str] | None = None) -> bool:
    """Directory-style URLs on CI; ``.html`` links elsewhere so local builds browse from disk."""
    environ = os.environ if environ is None else environ
    return environ.get(PRETTY_URLS_ENV) == "true"


def site_config(
    config: LitDocsConfig,
    pages: PageTree,
    *,
    environ: Mapping[str, str] | None = None,
) -> Dict[str, Any]:
    """Translate litdocs settings and the page tree into an ``mkdocs.yml`` mapping."""
    site = config.site
    theme: Dict[str, Any] = {
        "name": site.theme,
        "navigation_depth": site.collapse_level + 1,
    }
    if site.analytics:
        theme["analytics"] = {"gtag": site.analytics}

    data: Dict[str, Any] = {"site_name": site.name}
    if site.author:
        data["site_author"] = site.author
    if site.repo_url:
        data["repo_url"] = site.repo_url
    data.update(
        {
            "docs_dir": config.docs_dir,
            "site_dir": config.site_dir,
            "use_directory_urls": pretty_urls(environ),
            "strict": True,
            "theme": theme,
            "markdown_extensions": list(MARKDOWN_EXTENSIONS),
            "nav": pages,
        }
    )
    if site.assets:
        data["extra_css"] = list(site.assets)
    return data


def _run_mkdocs(config_file: Path) -> None:
    mk_config = load_mkdocs_config(config_file=str(config_file), strict=True)
    mk_config.plugins.on_startup(command="build", dirty=False)
    try:
        mkdocs_build(mk_config)
    finally:
        mk_config.plugins.on_shutdown()


class SiteBuilder:
    """Writes the generated MkDocs configuration and runs a strict build."""

    def __init__(self, runner: Callable[[Path], None] | None = None) -> None:
        self._runner = runner or _run_mkdocs
        self.logger = get_logger("generator")

    def write_config(self, config: LitDocsConfig, pages: PageTree) -> Path:
        config_file = config.root / GENERATED_CONFIG_FILENAME
        data = site_config(config, pages)
        config_file.write_text(
            yaml.safe_dump(data, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
        self.logger.debug("Wrote %s", config_file)
        return config_file

    def build(self, config: LitDocsConfig, pages: PageTree) -> Path:
        """Build the site and return the output directory."""
        config_file = self.write_config(config, pages)
        self.logger.info("Building site into %s", config.site_path)
        try:
            self._runner(config_file)
        except MkDocsException as exc:
            raise SiteBuildError(f"MkDocs build failed: {exc}") from exc
        return config.site_path


__all__ = ["SiteBuildError", "SiteBuilder", "pretty_urls", "site_config"]
