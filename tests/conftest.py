"""Shared pytest fixtures for the express-scaffold test suite.

Provides reusable fixtures for:
- Empty and pre-scaffolded project directories
- Emitters and registries
- Non-interactive choice providers
- A recording dependency installer
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from express_scaffold.installer import InstallResult
from express_scaffold.prompts import StaticChoiceProvider
from express_scaffold.scaffolder.emitter import Emitter
from express_scaffold.scaffolder.paths import STRUCTURE_FOLDERS
from express_scaffold.scaffolder.templates import TemplateRegistry


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty project directory (auto-cleanup)."""
    path = tmp_path / "api"
    path.mkdir()
    return path


@pytest.fixture
def scaffolded_dir(project_dir: Path) -> Path:
    """Project directory that already has the five structural folders."""
    for folder in STRUCTURE_FOLDERS:
        (project_dir / folder).mkdir()
    return project_dir


def snapshot(root: Path) -> dict[str, str | None]:
    """Map every entry under *root* to its text (``None`` for directories)."""
    return {
        p.relative_to(root).as_posix(): (None if p.is_dir() else p.read_text(encoding="utf-8"))
        for p in sorted(root.rglob("*"))
    }


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

@pytest.fixture
def registry() -> TemplateRegistry:
    return TemplateRegistry()


@pytest.fixture
def emitter(registry: TemplateRegistry) -> Emitter:
    return Emitter(registry)


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def mongo_choices() -> StaticChoiceProvider:
    return StaticChoiceProvider({"db_type": "MongoDB", "model_name": "Order"})


@pytest.fixture
def mysql_choices() -> StaticChoiceProvider:
    return StaticChoiceProvider({"db_type": "MySQL", "model_name": "User"})


class RecordingInstaller:
    """Installer double that records calls and returns a canned result."""

    def __init__(self, result: InstallResult) -> None:
        self.result = result
        self.calls: list[list[str]] = []

    def install(self, packages: Sequence[str]) -> InstallResult:
        self.calls.append(list(packages))
        return self.result


@pytest.fixture
def ok_installer() -> RecordingInstaller:
    return RecordingInstaller(InstallResult(ok=True, message="added 120 packages"))


@pytest.fixture
def failing_installer() -> RecordingInstaller:
    return RecordingInstaller(InstallResult(ok=False, message="npm ERR! code E404"))


@pytest.fixture(name="snapshot")
def snapshot_fixture():
    """The :func:`snapshot` helper, for tests comparing filesystem state."""
    return snapshot
