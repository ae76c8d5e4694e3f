"""Tests for litdocs.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from litdocs.config import ConfigError, LitDocsConfig, load_config
from litdocs.constants import DEFAULT_PAGES, TUTORIAL_SUBDIRS
from tests._fixtures.docs_builder import DocsTreeBuilder


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, LitDocsConfig)
    assert config.root == tmp_path.resolve()
    assert config.docs_path == tmp_path.resolve() / "src"
    assert config.site_path == tmp_path.resolve() / "build"
    assert config.tutorial_path == tmp_path.resolve() / "src" / "tutorials"
    assert config.tutorials.subdirs == list(TUTORIAL_SUBDIRS)
    assert config.tutorials.extension == ".py"
    assert config.external.enabled is False
    assert config.doctest.enabled is True
    assert config.deploy.remote_branch == "gh-pages"
    assert config.pages == DEFAULT_PAGES


def test_default_pages_are_copied(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    config.pages[3]["Manual"].append("manual/extra.md")

    assert "manual/extra.md" not in DEFAULT_PAGES[3]["Manual"]


def test_load_config_parses_expected_fields(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write_config(
        """
        site:
          name: "JuMP"
          author: "The developers"
          repo_url: "https://github.com/jump-dev/JuMP.jl/"
          edit_branch: "main"
          analytics: "UA-44252521-1"
          collapse_level: 2
          assets: [assets/extra_styles.css]
        docs_dir: pages
        site_dir: public
        tutorials:
          dir: guides
          subdirs:
            - "Getting started"
            - "Conic programs"
          extension: py
        external:
          package: mathopt
          target: moi
          title: MathOptInterface
          url: "https://example.org/moi"
        doctest:
          enabled: false
        deploy:
          remote_name: upstream
        pages:
          - Home: index.md
          - Tutorials: "@tutorials"
        """
    )

    config = docs_builder.config()

    assert config.site.name == "JuMP"
    assert config.site.author == "The developers"
    assert config.site.repo_url == "https://github.com/jump-dev/JuMP.jl"
    assert config.site.edit_branch == "main"
    assert config.site.analytics == "UA-44252521-1"
    assert config.site.collapse_level == 2
    assert config.site.assets == ["assets/extra_styles.css"]
    assert config.docs_path == docs_builder.path().resolve() / "pages"
    assert config.site_path == docs_builder.path().resolve() / "public"
    assert config.tutorial_path == docs_builder.path().resolve() / "pages" / "guides"
    assert config.tutorials.subdirs == ["Getting started", "Conic programs"]
    assert config.tutorials.extension == ".py"
    assert config.external.enabled is True
    assert config.external.package == "mathopt"
    assert config.external.target == "moi"
    assert config.external.title == "MathOptInterface"
    assert config.external.source_subdir == "src"
    assert config.doctest.enabled is False
    assert config.deploy.remote_name == "upstream"
    assert config.deploy.remote_branch == "gh-pages"
    assert config.pages == [{"Home": "index.md"}, {"Tutorials": "@tutorials"}]


def test_load_config_accepts_config_file_path(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write_config("site:\n  name: Example\n")

    config = load_config(docs_builder.path(".litdocs.yml"))

    assert config.site.name == "Example"
    assert config.root == docs_builder.path().resolve()


def test_external_docs_dir_is_resolved_against_root(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write_config("external:\n  docs_dir: ../vendor/docs\n")

    config = docs_builder.config()

    assert config.external.enabled is True
    assert config.external.docs_dir == (docs_builder.path() / ".." / "vendor" / "docs").resolve()


def test_external_without_source_is_rejected(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write_config("external:\n  title: Orphan\n")

    with pytest.raises(ConfigError):
        docs_builder.config()


def test_load_config_rejects_non_mapping_root(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write_config("- just\n- a list\n")

    with pytest.raises(ConfigError):
        docs_builder.config()


def test_load_config_rejects_invalid_yaml(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write_config("site: [unclosed\n")

    with pytest.raises(ConfigError):
        docs_builder.config()


def test_load_config_rejects_non_list_pages(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write_config("pages: index.md\n")

    with pytest.raises(ConfigError):
        docs_builder.config()


def test_empty_config_file_uses_defaults(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write_config("\n")

    config = docs_builder.config()

    assert config.site.name == "Documentation"
    assert config.pages == DEFAULT_PAGES
