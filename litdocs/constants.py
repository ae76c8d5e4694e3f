"""Shared constants for the documentation layout and page tree."""

from __future__ import annotations

CONFIG_FILENAME = ".litdocs.yml"
GENERATED_CONFIG_FILENAME = "mkdocs.yml"

# Placeholder in a page tree replaced by the discovered tutorial pages.
TUTORIALS_MARKER = "@tutorials"

TUTORIAL_SUBDIRS: tuple[str, ...] = (
    "Getting started",
    "Mixed-integer linear programs",
    "Nonlinear programs",
    "Quadratic programs",
    "Conic programs",
    "Semidefinite programs",
    "Optimization concepts",
)

DEFAULT_PAGES: list[object] = [
    {"Introduction": "index.md"},
    "installation.md",
    {"Tutorials": TUTORIALS_MARKER},
    {
        "Manual": [
            "manual/models.md",
            "manual/variables.md",
            "manual/expressions.md",
            "manual/objective.md",
            "manual/constraints.md",
            "manual/containers.md",
            "manual/solutions.md",
            "manual/nlp.md",
            "manual/callbacks.md",
        ]
    },
    {
        "API Reference": [
            "reference/models.md",
            "reference/variables.md",
            "reference/expressions.md",
            "reference/objectives.md",
            "reference/constraints.md",
            "reference/containers.md",
            "reference/solutions.md",
            "reference/nlp.md",
            "reference/callbacks.md",
            "reference/extensions.md",
        ]
    },
    {
        "Background information": [
            "background/should_i_use.md",
            "background/algebraic_modeling_languages.md",
        ]
    },
    {
        "Developer Docs": [
            {"Contributing": "developers/contributing.md"},
            {"Extensions": "developers/extensions.md"},
            {"Style Guide": "developers/style.md"},
            {"Roadmap": "developers/roadmap.md"},
        ]
    },
    {"Release notes": "release_notes.md"},
]

DEFAULT_EXTERNAL_BANNER = """!!! info
    This documentation is a copy of the official {title} documentation{source}.
    It is included here to make it easier to link concepts between
    {site_name} and {title}.

"""


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_EXTERNAL_BANNER",
    "DEFAULT_PAGES",
    "GENERATED_CONFIG_FILENAME",
    "TUTORIALS_MARKER",
    "TUTORIAL_SUBDIRS",
]
