"""Verify ``>>>`` examples embedded in markdown pages."""

from __future__ import annotations

import doctest
import re
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from .logging import get_logger
from .models import PageTree
from .postproc.links import iter_page_paths

_FENCE_PATTERN = re.compile(
    r"^```[ \t]*([A-Za-z0-9_+-]*)[^\n]*\n(.*?)^```[ \t]*$",
    re.MULTILINE | re.DOTALL,
)
_DOCTEST_LANGUAGES = {"", "python", "python3", "py", "pycon"}


class DoctestFailure(RuntimeError):
    """Raised when embedded examples in one or more pages fail."""

    def __init__(self, failures: Dict[str, str]) -> None:
        super().__init__("Doctests failed in: " + ", ".join(sorted(failures)))
        self.failures = failures


def extract_examples(markdown: str) -> List[Tuple[int, str]]:
    """Return ``(line offset, block)`` for fenced python blocks holding ``>>>`` prompts."""
    examples: List[Tuple[int, str]] = []
    for match in _FENCE_PATTERN.finditer(markdown):
        language, body = match.group(1).lower(), match.group(2)
        if language not in _DOCTEST_LANGUAGES or ">>>" not in body:
            continue
        lineno = markdown.count("\n", 0, match.start(2))
        examples.append((lineno, body))
    return examples


class DoctestRunner:
    """Runs the examples of each page in one namespace shared across its blocks."""

    def __init__(self, optionflags: int = doctest.ELLIPSIS | doctest.NORMALIZE_WHITESPACE) -> None:
        self.optionflags = optionflags
        self.logger = get_logger("doctests")
        self._parser = doctest.DocTestParser()

    def run_page(self, path: Path, *, name: str) -> Tuple[doctest.TestResults, str]:
        text = path.read_text(encoding="utf-8")
        globs: Dict[str, object] = {"__name__": "__litdocs_doctest__"}
        runner = doctest.DocTestRunner(optionflags=self.optionflags, verbose=False)
        report: List[str] = []
        failed = attempted = 0
        for lineno, block in extract_examples(text):
            test = self._parser.get_doctest(block, globs, name, str(path), lineno)
            result = runner.run(test, out=report.append, clear_globs=False)
            # DocTest copies its globals; carry definitions into the next block.
            globs.update(test.globs)
            failed += result.failed
            attempted += result.attempted
        return doctest.TestResults(failed, attempted), "".join(report)

    def run(
        self,
        docs_dir: Path,
        pages: PageTree,
        *,
        exclude_prefixes: Sequence[str] = (),
    ) -> int:
        """Check every page in the tree and return the number of examples run."""
        seen = set()
        failures: Dict[str, str] = {}
        attempted = 0
        for page in iter_page_paths(pages):
            if page in seen or "://" in page:
                continue
            seen.add(page)
            if any(page.startswith(prefix.rstrip("/") + "/") for prefix in exclude_prefixes):
                continue
            result, report = self.run_page(docs_dir / page, name=page)
            attempted += result.attempted
            if result.failed:
                self.logger.error("Doctest failures in %s:\n%s", page, report)
                failures[page] = report
        if failures:
            raise DoctestFailure(failures)
        self.logger.info("Verified %d embedded examples", attempted)
        return attempted


__all__ = ["DoctestFailure", "DoctestRunner", "extract_examples"]
