"""npm package manager capability.

Drives the ``npm`` executable for the queries both flows need: the
global module root, global install state, registry versions, and
global install/uninstall. Also provides the npm-backed update checker
used by the launcher.
"""

import json
import logging
import shutil
import subprocess
from pathlib import Path

from packaging.version import InvalidVersion, Version

from ccupdater.models.tool import ManagedToolReference
from ccupdater.utils.shell import CommandResult, run_command

logger = logging.getLogger(__name__)


class NpmError(Exception):
    """Raised when an npm command fails or returns unusable output."""


class NpmNotFoundError(NpmError):
    """Raised when no npm executable is available on PATH."""


class UpdateCheckError(Exception):
    """Raised when installed and latest versions cannot be compared."""


class NpmClient:
    """Thin wrapper around the npm CLI.

    Attributes:
        _timeout: Timeout in seconds for query commands.
        _install_timeout: Timeout in seconds for install/uninstall commands.
    """

    def __init__(self, *, timeout: float = 60.0, install_timeout: float = 300.0) -> None:
        """Initialize the client.

        Args:
            timeout: Timeout in seconds for query commands.
            install_timeout: Timeout in seconds for install/uninstall commands.
        """
        self._timeout = timeout
        self._install_timeout = install_timeout

    def _run(self, args: list[str], *, timeout: float) -> CommandResult:
        """Run an npm subcommand.

        The executable is resolved through PATH first so Windows ``npm.cmd``
        shims are found without going through a shell.

        Raises:
            NpmNotFoundError: If npm is not installed.
            NpmError: If the command times out or cannot be executed.
        """
        npm = shutil.which("npm")
        if npm is None:
            msg = "npm executable not found on PATH"
            raise NpmNotFoundError(msg)

        logger.debug("Running npm %s", " ".join(args))
        try:
            return run_command([npm, *args], timeout=timeout)
        except subprocess.TimeoutExpired as e:
            msg = f"npm {args[0]} timed out after {timeout:.0f} seconds"
            raise NpmError(msg) from e
        except OSError as e:
            msg = f"Failed to execute npm {args[0]}: {e}"
            raise NpmError(msg) from e

    def global_root(self) -> Path:
        """Get the global node_modules directory (``npm root -g``).

        Raises:
            NpmError: If the query fails or returns nothing.
        """
        result = self._run(["root", "-g"], timeout=self._timeout)
        root = result.stdout.strip()
        if not result.success or not root:
            msg = result.stderr.strip() or "npm root -g returned no path"
            raise NpmError(msg)
        return Path(root)

    def _global_dependencies(self, name: str) -> dict[str, object]:
        """Query ``npm ls -g <name>`` and return its dependency mapping.

        ``npm ls`` exits non-zero when the package is missing but still
        prints valid JSON, so the exit code alone is not conclusive.

        Raises:
            NpmError: If the output is not a JSON object.
        """
        result = self._run(["ls", "-g", name, "--json", "--depth=0"], timeout=self._timeout)
        if not result.stdout.strip():
            if result.success:
                return {}
            msg = result.stderr.strip() or f"npm ls exited with code {result.returncode}"
            raise NpmError(msg)

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            msg = f"Unparseable output from npm ls: {e}"
            raise NpmError(msg) from e

        if not isinstance(data, dict):
            msg = "Unexpected output from npm ls"
            raise NpmError(msg)
        dependencies = data.get("dependencies") or {}
        if not isinstance(dependencies, dict):
            msg = "Unexpected dependencies section from npm ls"
            raise NpmError(msg)
        return dependencies

    def is_installed(self, name: str) -> bool:
        """Check whether a package is installed globally.

        Raises:
            NpmNotFoundError: If npm is not installed.
            NpmError: If the query is inconclusive.
        """
        return name in self._global_dependencies(name)

    def installed_version(self, name: str) -> str | None:
        """Get the globally installed version of a package.

        Returns:
            Version string, or None if the package is not installed.

        Raises:
            NpmError: If the query is inconclusive.
        """
        entry = self._global_dependencies(name).get(name)
        if not isinstance(entry, dict):
            return None
        version = entry.get("version")
        return str(version) if version else None

    def latest_version(self, name: str) -> str:
        """Get the latest version published to the registry.

        Raises:
            NpmError: If the registry query fails.
        """
        result = self._run(["view", name, "version"], timeout=self._timeout)
        version = result.stdout.strip()
        if not result.success or not version:
            msg = result.stderr.strip() or f"No version information for {name}"
            raise NpmError(msg)
        return version

    def install_latest(self, name: str) -> None:
        """Install the latest version of a package globally.

        Raises:
            NpmError: If the install fails.
        """
        logger.info("Installing %s@latest globally", name)
        result = self._run(["install", "-g", f"{name}@latest"], timeout=self._install_timeout)
        if not result.success:
            msg = result.stderr.strip() or f"npm install exited with code {result.returncode}"
            raise NpmError(msg)

    def uninstall(self, name: str) -> None:
        """Uninstall a global package.

        Raises:
            NpmError: If the uninstall fails.
        """
        logger.info("Uninstalling global package %s", name)
        result = self._run(["uninstall", "-g", name], timeout=self._install_timeout)
        if not result.success:
            msg = result.stderr.strip() or f"npm uninstall exited with code {result.returncode}"
            raise NpmError(msg)


class NpmUpdateChecker:
    """Update-check capability backed by the npm registry.

    A managed tool that is not installed at all counts as having an
    update available: installing it is the update.
    """

    def __init__(self, tool: ManagedToolReference, client: NpmClient) -> None:
        self._tool = tool
        self._client = client

    def has_update(self) -> bool:
        """Check whether the registry has a newer version than installed.

        Raises:
            NpmError: If npm cannot be queried.
            UpdateCheckError: If either version string is malformed.
        """
        name = self._tool.registry_name
        installed = self._client.installed_version(name)
        latest = self._client.latest_version(name)

        if installed is None:
            logger.info("%s is not installed; latest is %s", name, latest)
            return True

        try:
            newer = Version(latest) > Version(installed)
        except InvalidVersion as e:
            msg = f"Cannot compare versions {installed!r} and {latest!r}: {e}"
            raise UpdateCheckError(msg) from e

        logger.debug("%s installed=%s latest=%s", name, installed, latest)
        return newer

    def update(self) -> None:
        """Install the latest version of the managed tool.

        Raises:
            NpmError: If the install fails.
        """
        self._client.install_latest(self._tool.registry_name)
