"""Tests for sandboxed tutorial execution."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from litdocs.sandbox import TutorialExecutionError, include_sandbox


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_include_sandbox_returns_namespace(tmp_path: Path) -> None:
    script = _write(tmp_path / "tutorial.py", "x = 41\ny = x + 1\n")

    namespace = include_sandbox(script)

    assert namespace["y"] == 42
    assert namespace["__file__"] == str(script)


def test_names_do_not_leak_between_tutorials(tmp_path: Path) -> None:
    first = _write(tmp_path / "first.py", "leaked = 1\n")
    second = _write(tmp_path / "second.py", "assert 'leaked' not in globals()\n")

    first_ns = include_sandbox(first)
    second_ns = include_sandbox(second)

    assert first_ns["__name__"] != second_ns["__name__"]
    assert first_ns["__name__"] not in sys.modules
    assert "leaked" not in second_ns


def test_functions_and_classes_resolve_module_globals(tmp_path: Path) -> None:
    script = _write(
        tmp_path / "defs.py",
        "FACTOR = 3\n"
        "def scale(value):\n"
        "    return value * FACTOR\n"
        "result = scale(2)\n",
    )

    assert include_sandbox(script)["result"] == 6


def test_failure_is_wrapped_with_path(tmp_path: Path) -> None:
    script = _write(tmp_path / "broken.py", "raise ValueError('boom')\n")

    with pytest.raises(TutorialExecutionError) as excinfo:
        include_sandbox(script)

    assert excinfo.value.path == script
    assert isinstance(excinfo.value.cause, ValueError)
    assert "broken.py" in str(excinfo.value)


def test_syntax_error_is_wrapped(tmp_path: Path) -> None:
    script = _write(tmp_path / "syntax.py", "def broken(:\n")

    with pytest.raises(TutorialExecutionError) as excinfo:
        include_sandbox(script)

    assert isinstance(excinfo.value.cause, SyntaxError)


def test_system_exit_is_a_failure(tmp_path: Path) -> None:
    script = _write(tmp_path / "exits.py", "import sys\nsys.exit(3)\n")

    with pytest.raises(TutorialExecutionError):
        include_sandbox(script)


def test_undefined_annotation_is_a_failure(tmp_path: Path) -> None:
    script = _write(
        tmp_path / "annotated.py",
        "def f(x: UndefinedName) -> None:\n"
        "    pass\n"
        "f.__annotations__\n",
    )

    with pytest.raises(TutorialExecutionError) as excinfo:
        include_sandbox(script)

    assert isinstance(excinfo.value.cause, NameError)


def test_annotations_are_not_stringified(tmp_path: Path) -> None:
    script = _write(
        tmp_path / "annotated.py",
        "def f(x: int) -> None:\n"
        "    pass\n"
        "ANNOTATION = f.__annotations__['x']\n",
    )

    namespace = include_sandbox(script)

    assert namespace["ANNOTATION"] is int
