"""Convert literate Python sources into markdown pages.

A literate source mixes prose and code. Comment lines of the form ``# text``
(or a bare ``#``) become markdown; everything else is code and is emitted in
fenced ``python`` blocks. A handful of line filters control what reaches the
page:

* lines ending in ``#src`` are executed but never shown,
* lines starting with ``#nb`` or ``#py`` are dropped from markdown output,
* a leading ``#md `` marker is removed and the remainder kept (a bare ``#md``
  is a blank prose line),
* ``#-`` splits two code blocks that would otherwise be merged,
* ``## comment`` inside code is rendered as a ``# comment`` code comment.

Every page starts with an ``EditURL`` comment pointing at its source and ends
with a "generated using" footer; :func:`litdocs.postproc.footer.link_example`
relies on both.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .logging import get_logger
from .postproc.lint import MarkdownLinter

EDIT_URL_COMMENT = '<!-- EditURL = "{url}" -->'
FOOTER = "---\n\n*This page was generated using litdocs from `{name}`.*"

_PROSE = "prose"
_CODE = "code"


class LiterateError(RuntimeError):
    """Raised when a literate source cannot be converted."""


def _filter_line(line: str) -> Optional[str]:
    if line.rstrip().endswith("#src"):
        return None
    if line in {"#nb", "#py"} or line.startswith(("#nb ", "#py ")):
        return None
    if line == "#md":
        return "#"
    if line.startswith("#md "):
        return line[len("#md ") :]
    return line


def _classify(line: str) -> Tuple[str, str]:
    if line == "#":
        return _PROSE, ""
    if line.startswith("# "):
        return _PROSE, line[2:]
    if line == "##":
        return _CODE, "#"
    if line.startswith("## "):
        return _CODE, line[1:]
    return _CODE, line


def _trim_blank(lines: List[str]) -> List[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def parse_chunks(text: str) -> List[Tuple[str, List[str]]]:
    """Split literate source text into ordered prose and code chunks."""
    chunks: List[Tuple[str, List[str]]] = []
    current: Optional[Tuple[str, List[str]]] = None
    for raw in text.splitlines():
        line = _filter_line(raw.rstrip())
        if line is None:
            continue
        if line.strip() == "#-":
            current = None
            continue
        kind, content = _classify(line)
        if current is None or current[0] != kind:
            current = (kind, [])
            chunks.append(current)
        current[1].append(content)
    trimmed = [(kind, _trim_blank(lines)) for kind, lines in chunks]
    return [(kind, lines) for kind, lines in trimmed if lines]


def render(text: str, *, name: str, edit_url: str) -> str:
    """Render literate source text to markdown with header and footer."""
    parts = [EDIT_URL_COMMENT.format(url=edit_url)]
    for kind, lines in parse_chunks(text):
        body = "\n".join(lines)
        if kind == _PROSE:
            parts.append(body)
        else:
            parts.append(f"```python\n{body}\n```")
    parts.append(FOOTER.format(name=name))
    return "\n\n".join(parts) + "\n"


def markdown(
    source: Path,
    outdir: Path,
    *,
    edit_url: Optional[str] = None,
    postprocess: Optional[Callable[[str], str]] = None,
    linter: Optional[MarkdownLinter] = None,
) -> Path:
    """Write ``<outdir>/<source stem>.md`` generated from ``source`` and return its path."""
    source = Path(source)
    if not source.is_file():
        raise LiterateError(f"Literate source not found: {source}")
    text = source.read_text(encoding="utf-8")
    content = render(text, name=source.name, edit_url=edit_url or source.name)
    content = (linter or MarkdownLinter()).lint(content)
    if postprocess is not None:
        content = postprocess(content)

    target = Path(outdir) / f"{source.stem}.md"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    get_logger("literate").debug("Wrote %s", target)
    return target


__all__ = ["FOOTER", "LiterateError", "markdown", "parse_chunks", "render"]
