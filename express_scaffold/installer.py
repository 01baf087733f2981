"""Dependency installation for the generated project.

The scaffolder does not install anything itself; it hands a package list to
a ``DependencyInstaller`` and reports whatever the installer says.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from express_scaffold.utils import run_command


@dataclass(frozen=True)
class InstallResult:
    """Terminal result of one installer run."""

    ok: bool
    message: str = ""


class DependencyInstaller(Protocol):
    def install(self, packages: Sequence[str]) -> InstallResult:
        ...


class NpmInstaller:
    """Runs ``npm install <packages>`` in the project directory.

    The call blocks until npm exits; there is no timeout and no retry.
    """

    def __init__(self, cwd: str | Path, npm_command: str = "npm") -> None:
        self.cwd = Path(cwd)
        self.npm_command = npm_command

    def build_command(self, packages: Sequence[str]) -> list[str]:
        return [self.npm_command, "install", *packages]

    def install(self, packages: Sequence[str]) -> InstallResult:
        cmd = self.build_command(packages)
        try:
            returncode, stdout, stderr = asyncio.run(run_command(cmd, cwd=self.cwd))
        except FileNotFoundError as exc:
            return InstallResult(ok=False, message=f"{self.npm_command}: {exc.strerror or exc}")

        if returncode != 0:
            return InstallResult(ok=False, message=stderr or stdout or f"exit code {returncode}")
        return InstallResult(ok=True, message=stdout)
