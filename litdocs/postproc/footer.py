"""Rewrites the generated-page footer to link back to the tutorial source."""

from __future__ import annotations

import re

EDIT_URL_PATTERN = re.compile(r'^<!-- EditURL = "(.+?)" -->\n*', re.MULTILINE)
FOOTER_PATTERN = re.compile(r"^(---\n\n\*This page was generated using)", re.MULTILINE)
LINK_TEMPLATE = "[View this file on GitHub]({url}).\n\n"


class PatternNotFoundError(RuntimeError):
    """Raised when generated markdown lacks a marker the rewrite depends on."""


def link_example(content: str) -> str:
    """Move the EditURL reference into a "View this file" link above the footer."""
    edit_match = EDIT_URL_PATTERN.search(content)
    if edit_match is None:
        raise PatternNotFoundError("EditURL comment not found in generated markdown")
    edit_url = edit_match.group(1)
    content = content[: edit_match.start()] + content[edit_match.end() :]

    footer_match = FOOTER_PATTERN.search(content)
    if footer_match is None:
        raise PatternNotFoundError("Generated-page footer not found in markdown")
    link = LINK_TEMPLATE.format(url=edit_url)
    return content[: footer_match.start()] + link + content[footer_match.start() :]


__all__ = ["PatternNotFoundError", "link_example"]
