"""Tests for page-tree assembly."""

from __future__ import annotations

from litdocs.nav import PageTreeBuilder, tutorial_section
from tests._fixtures.docs_builder import DocsTreeBuilder


def test_tutorial_section_lists_markdown_in_order(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write(
        {
            "src/tutorials/Getting started/b.md": "",
            "src/tutorials/Getting started/a.md": "",
            "src/tutorials/Getting started/a.py": "",
            "src/tutorials/Conic programs/cones.md": "",
        }
    )

    section = tutorial_section(
        docs_builder.path("src/tutorials"),
        ["Getting started", "Conic programs"],
        prefix="tutorials",
    )

    assert section == [
        {"Getting started": ["tutorials/Getting started/a.md", "tutorials/Getting started/b.md"]},
        {"Conic programs": ["tutorials/Conic programs/cones.md"]},
    ]


def test_default_tree_embeds_tutorials(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write_config('tutorials:\n  subdirs: ["Getting started", "Quadratic programs"]\n')
    docs_builder.write(
        {
            "src/tutorials/Getting started/intro.md": "",
            "src/tutorials/Quadratic programs/.keep": "",
        }
    )

    pages = PageTreeBuilder().build(docs_builder.config())

    assert [next(iter(entry)) if isinstance(entry, dict) else entry for entry in pages] == [
        "Introduction",
        "installation.md",
        "Tutorials",
        "Manual",
        "API Reference",
        "Background information",
        "Developer Docs",
        "Release notes",
    ]
    assert pages[2] == {
        "Tutorials": [
            {"Getting started": ["tutorials/Getting started/intro.md"]},
            {"Quadratic programs": []},
        ]
    }


def test_bare_marker_is_spliced_in_place(docs_builder: DocsTreeBuilder) -> None:
    docs_builder.write_config(
        """
        tutorials:
          dir: guides
          subdirs: [Basics]
        pages:
          - index.md
          - Learn:
              - overview.md
              - "@tutorials"
        """
    )
    docs_builder.write({"src/guides/Basics/one.md": ""})

    pages = PageTreeBuilder().build(docs_builder.config())

    assert pages == [
        "index.md",
        {"Learn": ["overview.md", {"Basics": ["guides/Basics/one.md"]}]},
    ]
