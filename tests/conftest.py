from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.docs_builder import DocsTreeBuilder


@pytest.fixture
def docs_builder(tmp_path: Path) -> DocsTreeBuilder:
    """Provide a docs tree builder rooted at the pytest tmp_path."""
    return DocsTreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _local_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CI", raising=False)
