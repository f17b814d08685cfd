"""Delegate resolution for the managed tool.

Locates the installed managed binary with a cascading fallback:

1. Direct-name: the local command is on PATH.
2. Global-module: ask npm for its global module root, read the package
   manifest there and run its declared ``bin`` entry with node.

Resolution fails only when both strategies fail.
"""

import json
import logging
import shutil
import sys
from pathlib import Path

from ccupdater.models.tool import DelegateTarget, ManagedToolReference
from ccupdater.updater.npm import NpmClient, NpmError

logger = logging.getLogger(__name__)


class DelegateNotFoundError(Exception):
    """Raised when the managed tool cannot be located."""

    def __init__(self, tool: ManagedToolReference, detail: str | None = None) -> None:
        self.tool = tool
        message = f"Could not find {tool.registry_name}. Install it with: {tool.install_hint}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class DelegateResolver:
    """Resolves the managed tool to a spawnable DelegateTarget.

    Attributes:
        _client: npm client used by the global-module strategy.
        _self_path: Path of the running shim, never returned as a target.
    """

    def __init__(self, client: NpmClient, *, self_path: Path | None = None) -> None:
        """Initialize the resolver.

        Args:
            client: npm client used for the global module root.
            self_path: Executable of the running shim. Defaults to sys.argv[0].
        """
        self._client = client
        self._self_path = self_path if self_path is not None else Path(sys.argv[0])

    def resolve(self, tool: ManagedToolReference) -> DelegateTarget:
        """Locate the managed tool.

        Args:
            tool: Managed tool to locate.

        Returns:
            DelegateTarget for spawning the tool.

        Raises:
            DelegateNotFoundError: If neither strategy finds the tool.
        """
        target = self._try_direct(tool)
        if target is not None:
            return target

        target = self._try_global_module(tool)
        if target is not None:
            return target

        raise DelegateNotFoundError(tool)

    def _is_self(self, candidate: Path) -> bool:
        """Check whether a PATH hit is the running shim itself."""
        try:
            return candidate.resolve() == self._self_path.resolve()
        except OSError:
            return False

    def _try_direct(self, tool: ManagedToolReference) -> DelegateTarget | None:
        """Resolve the local command through PATH.

        Returns DelegateTarget if found, None to continue the cascade.
        """
        found = shutil.which(tool.local_command)
        if found is None:
            logger.debug("Direct-name: %s not on PATH", tool.local_command)
            return None

        if self._is_self(Path(found)):
            logger.debug("Direct-name: %s resolves to this shim, skipping", found)
            return None

        logger.debug("Direct-name: resolved %s to %s", tool.local_command, found)
        return DelegateTarget(executable_path=found)

    def _try_global_module(self, tool: ManagedToolReference) -> DelegateTarget | None:
        """Resolve the package's bin entry inside the npm global root.

        Returns DelegateTarget if found, None to continue the cascade.
        """
        try:
            root = self._client.global_root()
        except NpmError as e:
            logger.debug("Global-module: cannot query npm root: %s", e)
            return None

        package_dir = root.joinpath(*tool.registry_name.split("/"))
        manifest_path = package_dir / "package.json"
        if not manifest_path.is_file():
            logger.debug("Global-module: no manifest at %s", manifest_path)
            return None

        try:
            manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.debug("Global-module: unreadable manifest %s: %s", manifest_path, e)
            return None

        entry = _bin_entry(manifest, tool.local_command)
        if entry is None:
            logger.debug("Global-module: no bin entry for %s in %s", tool.local_command, manifest_path)
            return None

        script = package_dir / entry
        if not script.is_file():
            logger.debug("Global-module: bin script %s does not exist", script)
            return None

        node = shutil.which("node")
        if node is None:
            logger.debug("Global-module: node executable not on PATH")
            return None

        logger.debug("Global-module: resolved %s to %s", tool.local_command, script)
        return DelegateTarget(executable_path=node, invocation_args=(str(script),))


def _bin_entry(manifest: object, command: str) -> str | None:
    """Extract the executable entry for ``command`` from a package manifest.

    npm allows ``bin`` to be a single path (named after the package) or a
    mapping of command names to paths.
    """
    if not isinstance(manifest, dict):
        return None
    bin_field = manifest.get("bin")
    if isinstance(bin_field, str):
        return bin_field or None
    if isinstance(bin_field, dict):
        entry = bin_field.get(command)
        return entry if isinstance(entry, str) and entry else None
    return None
