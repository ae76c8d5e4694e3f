"""Configuration loading for litdocs (.litdocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .constants import CONFIG_FILENAME, DEFAULT_PAGES, TUTORIAL_SUBDIRS


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SiteConfig:
    """Site metadata forwarded to the static-site generator."""

    name: str = "Documentation"
    author: Optional[str] = None
    repo_url: Optional[str] = None
    edit_branch: str = "master"
    repo_root: str = ".."
    analytics: Optional[str] = None
    collapse_level: int = 1
    assets: List[str] = field(default_factory=list)
    theme: str = "mkdocs"


@dataclass
class TutorialConfig:
    """Where literate tutorials live, relative to the docs source directory."""

    dir: str = "tutorials"
    subdirs: List[str] = field(default_factory=lambda: list(TUTORIAL_SUBDIRS))
    extension: str = ".py"


@dataclass
class ExternalConfig:
    """Sibling project whose documentation is merged into this site."""

    enabled: bool = False
    package: Optional[str] = None
    docs_dir: Optional[Path] = None
    source_subdir: str = "src"
    target: str = "external"
    title: str = "External"
    url: Optional[str] = None
    banner: Optional[str] = None


@dataclass
class DoctestConfig:
    """Embedded-example verification settings."""

    enabled: bool = True
    include_external: bool = False


@dataclass
class DeployConfig:
    """Remote used by ``litdocs deploy``."""

    remote_name: str = "origin"
    remote_branch: str = "gh-pages"


@dataclass
class LitDocsConfig:
    """Represents the settings defined in .litdocs.yml."""

    root: Path
    site: SiteConfig = field(default_factory=SiteConfig)
    docs_dir: str = "src"
    site_dir: str = "build"
    tutorials: TutorialConfig = field(default_factory=TutorialConfig)
    external: ExternalConfig = field(default_factory=ExternalConfig)
    doctest: DoctestConfig = field(default_factory=DoctestConfig)
    deploy: DeployConfig = field(default_factory=DeployConfig)
    pages: List[Any] = field(default_factory=lambda: _copy_pages(DEFAULT_PAGES))

    @property
    def docs_path(self) -> Path:
        return self.root / self.docs_dir

    @property
    def site_path(self) -> Path:
        return self.root / self.site_dir

    @property
    def tutorial_path(self) -> Path:
        return self.docs_path / self.tutorials.dir

    @property
    def repo_root_path(self) -> Path:
        return (self.root / self.site.repo_root).resolve()


def load_config(config_path: Path) -> LitDocsConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return LitDocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    site_data = _as_dict(data.get("site"))
    site = SiteConfig()
    if site_data:
        site.name = _as_str(site_data.get("name")) or site.name
        site.author = _as_str(site_data.get("author"))
        site.repo_url = _strip_slash(_as_str(site_data.get("repo_url")))
        site.edit_branch = _as_str(site_data.get("edit_branch")) or site.edit_branch
        site.repo_root = _as_str(site_data.get("repo_root")) or site.repo_root
        site.analytics = _as_str(site_data.get("analytics"))
        collapse_level = _as_int(site_data.get("collapse_level"))
        if collapse_level is not None:
            site.collapse_level = collapse_level
        site.assets = _as_str_list(site_data.get("assets"))
        site.theme = _as_str(site_data.get("theme")) or site.theme

    tutorial_data = _as_dict(data.get("tutorials"))
    tutorials = TutorialConfig()
    if tutorial_data:
        tutorials.dir = _as_str(tutorial_data.get("dir")) or tutorials.dir
        subdirs = _as_str_list(tutorial_data.get("subdirs"))
        if subdirs:
            tutorials.subdirs = subdirs
        extension = _as_str(tutorial_data.get("extension"))
        if extension:
            tutorials.extension = extension if extension.startswith(".") else f".{extension}"

    external_data = _as_dict(data.get("external"))
    external = ExternalConfig()
    if external_data:
        enabled = _as_bool(external_data.get("enabled"))
        external.enabled = True if enabled is None else enabled
        external.package = _as_str(external_data.get("package"))
        docs_dir_str = _as_str(external_data.get("docs_dir"))
        external.docs_dir = (root / docs_dir_str).resolve() if docs_dir_str else None
        external.source_subdir = _as_str(external_data.get("source_subdir")) or external.source_subdir
        external.target = _as_str(external_data.get("target")) or external.target
        external.title = _as_str(external_data.get("title")) or external.title
        external.url = _as_str(external_data.get("url"))
        external.banner = _as_str(external_data.get("banner"))
        if external.enabled and not (external.package or external.docs_dir):
            raise ConfigError("external.enabled requires either external.package or external.docs_dir")

    doctest_data = _as_dict(data.get("doctest"))
    doctest = DoctestConfig()
    if doctest_data:
        enabled = _as_bool(doctest_data.get("enabled"))
        if enabled is not None:
            doctest.enabled = enabled
        doctest.include_external = _as_bool(doctest_data.get("include_external")) or False

    deploy_data = _as_dict(data.get("deploy"))
    deploy = DeployConfig()
    if deploy_data:
        deploy.remote_name = _as_str(deploy_data.get("remote_name")) or deploy.remote_name
        deploy.remote_branch = _as_str(deploy_data.get("remote_branch")) or deploy.remote_branch

    pages = data.get("pages")
    if pages is None:
        pages = _copy_pages(DEFAULT_PAGES)
    elif not isinstance(pages, list):
        raise ConfigError("pages must be a list of page entries")

    return LitDocsConfig(
        root=root,
        site=site,
        docs_dir=_as_str(data.get("docs_dir")) or "src",
        site_dir=_as_str(data.get("site_dir")) or "build",
        tutorials=tutorials,
        external=external,
        doctest=doctest,
        deploy=deploy,
        pages=pages,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _copy_pages(pages: Sequence[Any]) -> List[Any]:
    copied: List[Any] = []
    for entry in pages:
        if isinstance(entry, dict):
            copied.append(
                {
                    title: _copy_pages(value) if isinstance(value, list) else value
                    for title, value in entry.items()
                }
            )
        else:
            copied.append(entry)
    return copied


def _strip_slash(value: Optional[str]) -> Optional[str]:
    return value.rstrip("/") if value else value


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
