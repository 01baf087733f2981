"""Unit tests for the npm dependency installer."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from express_scaffold.installer import InstallResult, NpmInstaller


pytestmark = pytest.mark.unit


class TestNpmInstaller:
    def test_build_command(self, tmp_path: Path):
        installer = NpmInstaller(tmp_path)
        assert installer.build_command(["express", "cors"]) == ["npm", "install", "express", "cors"]

    def test_custom_npm_command(self, tmp_path: Path):
        installer = NpmInstaller(tmp_path, npm_command="pnpm")
        assert installer.build_command(["express"])[0] == "pnpm"

    def test_success(self, tmp_path: Path):
        run = AsyncMock(return_value=(0, "added 2 packages", ""))
        with patch("express_scaffold.installer.run_command", run):
            result = NpmInstaller(tmp_path).install(["express", "cors"])

        assert result == InstallResult(ok=True, message="added 2 packages")
        run.assert_awaited_once_with(["npm", "install", "express", "cors"], cwd=tmp_path)

    def test_failure_passes_stderr_through(self, tmp_path: Path):
        run = AsyncMock(return_value=(1, "", "npm ERR! 404 Not Found"))
        with patch("express_scaffold.installer.run_command", run):
            result = NpmInstaller(tmp_path).install(["nope"])

        assert result == InstallResult(ok=False, message="npm ERR! 404 Not Found")

    def test_failure_without_output(self, tmp_path: Path):
        run = AsyncMock(return_value=(2, "", ""))
        with patch("express_scaffold.installer.run_command", run):
            result = NpmInstaller(tmp_path).install(["express"])

        assert not result.ok
        assert result.message == "exit code 2"

    def test_missing_executable(self, tmp_path: Path):
        installer = NpmInstaller(tmp_path, npm_command="definitely-not-npm-12345")
        result = installer.install(["express"])
        assert not result.ok
        assert result.message.startswith("definitely-not-npm-12345:")
