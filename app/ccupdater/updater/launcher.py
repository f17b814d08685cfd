"""Launcher orchestration.

Runs the update-check-and-delegate state machine:
VersionGate -> (optional) UpdatePerformer -> DelegateResolver ->
ProcessDelegate. The result carries the exit code; terminating the
process is left to the CLI layer.
"""

import logging

from ccupdater.core.config import UpdaterConfig
from ccupdater.models.tool import LaunchResult, UpdateDecision
from ccupdater.updater.delegate import ProcessDelegate
from ccupdater.updater.gate import UpdateChecker, UpdatePerformer, VersionGate
from ccupdater.updater.npm import NpmClient, NpmUpdateChecker
from ccupdater.updater.resolver import DelegateNotFoundError, DelegateResolver
from ccupdater.utils.formatting import err_console, print_error

logger = logging.getLogger(__name__)

# Launcher-only flag; never forwarded to the managed tool
SKIP_UPDATE_FLAG = "--skip-update"


def split_launcher_args(argv: list[str]) -> tuple[bool, list[str]]:
    """Separate the launcher's own flag from forwarded arguments.

    Args:
        argv: Raw arguments after the program name.

    Returns:
        Tuple of (skip_update, forwarded_args). Forwarded arguments keep
        their original order.
    """
    skip_update = SKIP_UPDATE_FLAG in argv
    forwarded = [arg for arg in argv if arg != SKIP_UPDATE_FLAG]
    return skip_update, forwarded


class Launcher:
    """Update-check-and-delegate orchestrator.

    Collaborators default to the npm-backed implementations and can be
    injected for testing.
    """

    def __init__(
        self,
        config: UpdaterConfig | None = None,
        *,
        checker: UpdateChecker | None = None,
        resolver: DelegateResolver | None = None,
        delegate: ProcessDelegate | None = None,
    ) -> None:
        self._config = config or UpdaterConfig()
        self._tool = self._config.tool

        if checker is None or resolver is None:
            client = NpmClient(
                timeout=float(self._config.npm_timeout_seconds),
                install_timeout=float(self._config.update_timeout_seconds),
            )
            checker = checker or NpmUpdateChecker(self._tool, client)
            resolver = resolver or DelegateResolver(client)

        self._gate = VersionGate(checker)
        self._performer = UpdatePerformer(checker)
        self._resolver = resolver
        self._delegate = delegate or ProcessDelegate(self._tool)

    def run(self, argv: list[str]) -> LaunchResult:
        """Check for updates, then delegate to the managed tool.

        Args:
            argv: Raw arguments after the program name.

        Returns:
            LaunchResult carrying the managed tool's exit code, or 1 if
            the tool could not be located.
        """
        skip_update, forwarded = split_launcher_args(argv)

        if skip_update:
            logger.debug("Update check skipped by %s", SKIP_UPDATE_FLAG)
        elif not self._config.check_updates:
            logger.debug("Update check disabled in configuration")
        else:
            self.check_and_update()

        try:
            target = self._resolver.resolve(self._tool)
            exit_code = self._delegate.launch(target, forwarded)
        except DelegateNotFoundError as e:
            print_error(str(e))
            return LaunchResult(exit_code=1)

        return LaunchResult(exit_code=exit_code)

    def check_and_update(self) -> UpdateDecision:
        """Run the version gate and apply an available update.

        Never raises: check and update failures are reported as warnings.

        Returns:
            The gate's decision.
        """
        name = self._tool.registry_name

        err_console.print(f"[muted]Checking for {name} updates...[/]")
        decision = self._gate.decide()
        updated = False
        if decision is UpdateDecision.UPDATE_AVAILABLE:
            err_console.print(f"[info]Updating {name}...[/]")
            updated = self._performer.apply()

        if decision is UpdateDecision.UP_TO_DATE:
            err_console.print(f"[info]{name} is up to date[/]")
        elif decision is UpdateDecision.CHECK_FAILED:
            err_console.print("[warning]Update check failed, proceeding with current version[/]")
        elif updated:
            err_console.print(f"[success]{name} updated successfully![/]")
        else:
            err_console.print("[warning]Update failed, proceeding with current version[/]")

        return decision
