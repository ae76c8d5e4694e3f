"""Whitespace normalisation for generated markdown."""

from __future__ import annotations

from typing import List


class MarkdownLinter:
    """Normalises line endings and blank-line runs outside code fences."""

    def lint(self, markdown: str) -> str:
        normalized = markdown.replace("\r\n", "\n").replace("\r", "\n")
        cleaned: List[str] = []
        in_code = False
        previous_blank = False

        for line in normalized.split("\n"):
            stripped = line.rstrip()
            if stripped.startswith("```"):
                in_code = not in_code
                cleaned.append(stripped)
                previous_blank = False
                continue

            if in_code:
                # Code is emitted verbatim apart from trailing whitespace.
                cleaned.append(stripped)
                continue

            if not stripped:
                if previous_blank:
                    continue
                previous_blank = True
                cleaned.append("")
                continue

            cleaned.append(stripped)
            previous_blank = False

        while cleaned and cleaned[0] == "":
            cleaned.pop(0)
        while cleaned and cleaned[-1] == "":
            cleaned.pop()

        return "\n".join(cleaned) + "\n"
