"""Publish a built site to a git branch."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Callable, Iterable

from ..config import LitDocsConfig
from ..logging import get_logger


class DeployError(RuntimeError):
    """Raised when ``mkdocs gh-deploy`` fails."""


class Deployer:
    """Runs ``mkdocs gh-deploy`` against the generated configuration."""

    def __init__(self, runner: Callable[..., None] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("deploy")

    def deploy(self, config: LitDocsConfig, config_file: Path) -> None:
        args = [
            sys.executable,
            "-m",
            "mkdocs",
            "gh-deploy",
            "--config-file",
            str(config_file),
            "--force",
            "--remote-name",
            config.deploy.remote_name,
            "--remote-branch",
            config.deploy.remote_branch,
        ]
        self.logger.info(
            "Deploying to %s/%s", config.deploy.remote_name, config.deploy.remote_branch
        )
        try:
            self._runner(args, cwd=config.root)
        except subprocess.CalledProcessError as exc:
            raise DeployError(f"mkdocs gh-deploy exited with status {exc.returncode}") from exc

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> None:
        subprocess.run(list(args), cwd=str(cwd), check=True, text=True)


__all__ = ["DeployError", "Deployer"]
