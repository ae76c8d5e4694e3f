"""Merge a sibling project's documentation into the local docs tree."""

from __future__ import annotations

import importlib.util
import os
import shutil
import stat
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from .config import LitDocsConfig
from .constants import DEFAULT_EXTERNAL_BANNER
from .logging import get_logger
from .models import PageTree

PAGES_FILENAME = "pages.yml"
MKDOCS_FILENAME = "mkdocs.yml"

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


class ExternalDocsError(RuntimeError):
    """Raised when the external documentation cannot be located or merged."""


class _TolerantLoader(yaml.SafeLoader):
    """Safe loader that reads custom tags (``!ENV``, ``!!python/name``) as plain data."""


def _construct_unknown(loader: yaml.SafeLoader, tag_suffix: str, node: yaml.Node) -> Any:
    if isinstance(node, yaml.ScalarNode):
        return loader.construct_scalar(node)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node, deep=True)
    return loader.construct_mapping(node, deep=True)


_TolerantLoader.add_multi_constructor("", _construct_unknown)


def prefix_pages(pages: List[Any], prefix: str) -> PageTree:
    """Point every relative ``.md`` path in ``pages`` into ``prefix``."""

    def rewrite(value: Any) -> Any:
        if isinstance(value, str):
            if value.endswith(".md") and "://" not in value and not value.startswith("/"):
                return f"{prefix}/{value}"
            return value
        if isinstance(value, list):
            return [rewrite(item) for item in value]
        if isinstance(value, dict):
            return {title: rewrite(item) for title, item in value.items()}
        return value

    return rewrite(pages)


def load_page_list(docs_dir: Path) -> List[Any]:
    """Read the page tree the external project publishes next to its sources."""
    pages_file = docs_dir / PAGES_FILENAME
    mkdocs_file = docs_dir / MKDOCS_FILENAME
    if pages_file.is_file():
        data = _load_yaml(pages_file)
        pages = data.get("pages") if isinstance(data, dict) else data
        source = pages_file
    elif mkdocs_file.is_file():
        data = _load_yaml(mkdocs_file)
        pages = data.get("nav") if isinstance(data, dict) else None
        source = mkdocs_file
    else:
        raise ExternalDocsError(f"No {PAGES_FILENAME} or {MKDOCS_FILENAME} found in {docs_dir}")
    if not isinstance(pages, list) or not pages:
        raise ExternalDocsError(f"{source} does not define a page list")
    return pages


def _load_yaml(path: Path) -> Any:
    try:
        return yaml.load(path.read_text(encoding="utf-8"), Loader=_TolerantLoader)
    except yaml.YAMLError as exc:
        raise ExternalDocsError(f"Failed to parse {path}: {exc}") from exc


def _make_writable(root: Path) -> None:
    # Installed package data is frequently read-only.
    paths = [root]
    for current, dirs, files in os.walk(root):
        paths.extend(Path(current) / name for name in dirs + files)
    for path in paths:
        mode = stat.S_IMODE(os.lstat(path).st_mode)
        os.chmod(path, mode | _WRITE_BITS)


class ExternalDocs:
    """Copies, annotates and indexes the external documentation subtree."""

    def __init__(
        self,
        config: LitDocsConfig,
        *,
        finder: Callable[[str], Any] | None = None,
    ) -> None:
        self.config = config
        self.settings = config.external
        self._finder = finder or importlib.util.find_spec
        self.logger = get_logger("external")

    @property
    def target_path(self) -> Path:
        return self.config.docs_path / self.settings.target

    def clean(self) -> None:
        """Remove a previously merged subtree; a missing subtree is expected."""
        try:
            shutil.rmtree(self.target_path)
        except FileNotFoundError:
            pass

    def locate(self) -> Path:
        """Return the external project's docs directory."""
        subdir = self.settings.source_subdir
        if self.settings.docs_dir is not None:
            docs_dir = Path(self.settings.docs_dir)
            if not (docs_dir / subdir).is_dir():
                raise ExternalDocsError(f"{docs_dir / subdir} is not a directory")
            return docs_dir

        package = self.settings.package
        if not package:
            raise ExternalDocsError("No external package configured")
        try:
            spec = self._finder(package)
        except (ImportError, ValueError) as exc:
            raise ExternalDocsError(f"Cannot import {package}: {exc}") from exc
        package_dir = self._package_dir(spec)
        if package_dir is None:
            raise ExternalDocsError(f"Package {package} is not installed")

        for base in (package_dir, package_dir.parent, package_dir.parent.parent):
            candidate = base / "docs"
            if (candidate / subdir).is_dir():
                return candidate
        raise ExternalDocsError(f"No docs/{subdir} directory found near {package_dir}")

    @staticmethod
    def _package_dir(spec: Any) -> Optional[Path]:
        if spec is None:
            return None
        locations = list(getattr(spec, "submodule_search_locations", None) or [])
        if locations:
            return Path(locations[0])
        origin = getattr(spec, "origin", None)
        if origin and origin not in {"built-in", "frozen"}:
            return Path(origin).parent
        return None

    def banner(self) -> str:
        if self.settings.banner:
            return self.settings.banner.rstrip("\n") + "\n\n"
        url = self.settings.url
        return DEFAULT_EXTERNAL_BANNER.format(
            title=self.settings.title,
            source=f"\n    available at [{url}]({url})" if url else "",
            site_name=self.config.site.name,
        )

    def add_banner(self) -> int:
        """Prepend the info banner to every copied page and return the page count."""
        banner = self.banner()
        count = 0
        for page in sorted(self.target_path.rglob("*.md")):
            page.write_text(banner + page.read_text(encoding="utf-8"), encoding="utf-8")
            count += 1
        return count

    def add_pages(self) -> Dict[str, PageTree]:
        """Copy the external docs in and return ``{title: page tree}`` for the nav."""
        docs_dir = self.locate()
        source = docs_dir / self.settings.source_subdir
        self.logger.info("Merging external docs from %s", source)
        shutil.copytree(source, self.target_path, dirs_exist_ok=True)
        _make_writable(self.target_path)

        pages = prefix_pages(load_page_list(docs_dir), self.settings.target)
        count = self.add_banner()
        self.logger.debug("Annotated %d external pages", count)
        return {self.settings.title: pages}


__all__ = ["ExternalDocs", "ExternalDocsError", "load_page_list", "prefix_pages"]
