"""Unit tests for the npm client and npm-backed update checker."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from ccupdater.models.tool import ManagedToolReference
from ccupdater.updater.npm import (
    NpmClient,
    NpmError,
    NpmNotFoundError,
    NpmUpdateChecker,
    UpdateCheckError,
)
from ccupdater.utils.shell import CommandResult


def _ok(stdout: str = "") -> CommandResult:
    return CommandResult(stdout=stdout, stderr="", returncode=0)


def _fail(stdout: str = "", stderr: str = "boom", code: int = 1) -> CommandResult:
    return CommandResult(stdout=stdout, stderr=stderr, returncode=code)


@pytest.fixture
def npm_on_path():
    """Pretend npm is installed at /usr/bin/npm."""
    with patch("ccupdater.updater.npm.shutil.which", return_value="/usr/bin/npm") as mock_which:
        yield mock_which


class TestNpmClientExecution:
    """Tests for command execution and error mapping."""

    @patch("ccupdater.updater.npm.shutil.which", return_value=None)
    def test_missing_npm_raises_not_found(self, _mock_which: MagicMock) -> None:
        """No npm on PATH raises NpmNotFoundError."""
        with pytest.raises(NpmNotFoundError):
            NpmClient().global_root()

    @patch("ccupdater.updater.npm.run_command")
    def test_uses_resolved_executable(self, mock_run: MagicMock, npm_on_path: MagicMock) -> None:
        """Commands run the npm path resolved from PATH."""
        mock_run.return_value = _ok("/usr/lib/node_modules\n")

        NpmClient(timeout=12.0).global_root()

        args = mock_run.call_args[0][0]
        assert args == ["/usr/bin/npm", "root", "-g"]
        assert mock_run.call_args.kwargs["timeout"] == 12.0

    @patch("ccupdater.updater.npm.run_command")
    def test_timeout_becomes_npm_error(self, mock_run: MagicMock, npm_on_path: MagicMock) -> None:
        """Timeouts are wrapped in NpmError."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="npm", timeout=60)

        with pytest.raises(NpmError, match="timed out"):
            NpmClient().latest_version("x")


class TestGlobalRoot:
    """Tests for global_root."""

    @patch("ccupdater.updater.npm.run_command")
    def test_returns_path(self, mock_run: MagicMock, npm_on_path: MagicMock) -> None:
        """Trimmed stdout becomes the root path."""
        mock_run.return_value = _ok("/usr/lib/node_modules\n")

        assert NpmClient().global_root() == Path("/usr/lib/node_modules")

    @patch("ccupdater.updater.npm.run_command")
    def test_failure_raises(self, mock_run: MagicMock, npm_on_path: MagicMock) -> None:
        """Non-zero exit raises NpmError."""
        mock_run.return_value = _fail()

        with pytest.raises(NpmError):
            NpmClient().global_root()


class TestInstallState:
    """Tests for is_installed and installed_version."""

    @patch("ccupdater.updater.npm.run_command")
    def test_installed(
        self, mock_run: MagicMock, npm_on_path: MagicMock, npm_ls_installed: str
    ) -> None:
        """A package listed in dependencies is installed."""
        mock_run.return_value = _ok(npm_ls_installed)
        client = NpmClient()

        assert client.is_installed("@anthropic-ai/claude-code") is True
        assert client.installed_version("@anthropic-ai/claude-code") == "1.0.30"

    @patch("ccupdater.updater.npm.run_command")
    def test_not_installed_despite_exit_code(
        self, mock_run: MagicMock, npm_on_path: MagicMock, npm_ls_empty: str
    ) -> None:
        """npm ls exits 1 for missing packages but the JSON is conclusive."""
        mock_run.return_value = _fail(stdout=npm_ls_empty)
        client = NpmClient()

        assert client.is_installed("claude-code-updater") is False
        assert client.installed_version("claude-code-updater") is None

    @patch("ccupdater.updater.npm.run_command")
    def test_unparseable_output(self, mock_run: MagicMock, npm_on_path: MagicMock) -> None:
        """Garbage output is inconclusive."""
        mock_run.return_value = _ok("npm WARN something")

        with pytest.raises(NpmError, match="Unparseable"):
            NpmClient().is_installed("x")

    @patch("ccupdater.updater.npm.run_command")
    def test_empty_output_on_failure(self, mock_run: MagicMock, npm_on_path: MagicMock) -> None:
        """A failed command with no output is inconclusive."""
        mock_run.return_value = _fail(stdout="", stderr="EACCES")

        with pytest.raises(NpmError, match="EACCES"):
            NpmClient().is_installed("x")


class TestInstallUninstall:
    """Tests for install_latest and uninstall."""

    @patch("ccupdater.updater.npm.run_command")
    def test_install_latest(self, mock_run: MagicMock, npm_on_path: MagicMock) -> None:
        """install_latest installs name@latest with the install timeout."""
        mock_run.return_value = _ok()

        NpmClient(install_timeout=99.0).install_latest("@anthropic-ai/claude-code")

        args = mock_run.call_args[0][0]
        assert args[1:] == ["install", "-g", "@anthropic-ai/claude-code@latest"]
        assert mock_run.call_args.kwargs["timeout"] == 99.0

    @patch("ccupdater.updater.npm.run_command")
    def test_install_failure(self, mock_run: MagicMock, npm_on_path: MagicMock) -> None:
        """Failed installs raise NpmError with stderr."""
        mock_run.return_value = _fail(stderr="EACCES: permission denied")

        with pytest.raises(NpmError, match="EACCES"):
            NpmClient().install_latest("x")

    @patch("ccupdater.updater.npm.run_command")
    def test_uninstall(self, mock_run: MagicMock, npm_on_path: MagicMock) -> None:
        """uninstall runs npm uninstall -g."""
        mock_run.return_value = _ok()

        NpmClient().uninstall("claude-code-updater")

        assert mock_run.call_args[0][0][1:] == ["uninstall", "-g", "claude-code-updater"]


class TestNpmUpdateChecker:
    """Tests for NpmUpdateChecker."""

    def _checker(
        self, tool: ManagedToolReference, installed: str | None, latest: str
    ) -> tuple[NpmUpdateChecker, MagicMock]:
        client = MagicMock(spec=NpmClient)
        client.installed_version.return_value = installed
        client.latest_version.return_value = latest
        return NpmUpdateChecker(tool, client), client

    def test_newer_version_available(self, tool: ManagedToolReference) -> None:
        """A higher registry version means an update is available."""
        checker, _ = self._checker(tool, "1.0.30", "1.0.31")

        assert checker.has_update() is True

    def test_up_to_date(self, tool: ManagedToolReference) -> None:
        """Equal versions mean no update."""
        checker, _ = self._checker(tool, "1.0.31", "1.0.31")

        assert checker.has_update() is False

    def test_not_installed_counts_as_update(self, tool: ManagedToolReference) -> None:
        """A missing installation is treated as an available update."""
        checker, _ = self._checker(tool, None, "1.0.31")

        assert checker.has_update() is True

    def test_malformed_version(self, tool: ManagedToolReference) -> None:
        """Unparseable versions raise UpdateCheckError."""
        checker, _ = self._checker(tool, "1.0.30", "not-a-version")

        with pytest.raises(UpdateCheckError):
            checker.has_update()

    def test_update_installs_registry_name(self, tool: ManagedToolReference) -> None:
        """update installs the managed package."""
        checker, client = self._checker(tool, "1.0.30", "1.0.31")

        checker.update()

        client.install_latest.assert_called_once_with("@anthropic-ai/claude-code")
