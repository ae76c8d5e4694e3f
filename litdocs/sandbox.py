"""Run tutorial sources inside throwaway module namespaces."""

from __future__ import annotations

import itertools
import os
import types
from pathlib import Path
from typing import Dict

from .logging import get_logger

_COUNTER = itertools.count(1)


class TutorialExecutionError(RuntimeError):
    """Raised when a tutorial source fails to execute."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Tutorial {path} failed: {type(cause).__name__}: {cause}")
        self.path = path
        self.cause = cause


def _sandbox_name() -> str:
    return f"__litdocs_sandbox_{os.getpid()}_{next(_COUNTER)}"


def include_sandbox(path: Path) -> Dict[str, object]:
    """Execute ``path`` in a fresh module so nothing leaks into other tutorials.

    The module is never registered in ``sys.modules``. Returns the namespace the
    file populated; callers normally discard it.
    """
    logger = get_logger("sandbox")
    path = Path(path)
    module = types.ModuleType(_sandbox_name())
    module.__file__ = str(path)
    source = path.read_text(encoding="utf-8")
    logger.debug("Executing %s in %s", path, module.__name__)
    try:
        # Tutorials must not inherit this module's __future__ flags.
        code = compile(source, str(path), "exec", dont_inherit=True)
        exec(code, module.__dict__)
    except (Exception, SystemExit) as exc:
        raise TutorialExecutionError(path, exc) from exc
    return module.__dict__


__all__ = ["TutorialExecutionError", "include_sandbox"]
