"""Cleanup orchestration.

Runs the removal sequence
``npm uninstall -> binaries -> aliases -> user data -> verify``.
Every step is best-effort and absorbs its own failures, so a problem
in one step never prevents the later ones from running.
"""

import logging
import sys
from pathlib import Path

from ccupdater.cleanup.aliases import AliasScrubber
from ccupdater.cleanup.artifacts import ArtifactLocator
from ccupdater.cleanup.userdata import UserDataManager
from ccupdater.cleanup.verifier import CleanupVerifier
from ccupdater.models.cleanup import CleanupReport, ShimReference
from ccupdater.updater.npm import NpmClient, NpmError

logger = logging.getLogger(__name__)

# Fixed fallback shown when automatic cleanup fails or leaves residue.
# Each entry is (heading, commands).
MANUAL_INSTRUCTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Remove npm package:",
        ("npm uninstall -g claude-code-updater --force",),
    ),
    (
        "Remove binary files:",
        (
            "rm -f ~/.nvm/versions/node/*/bin/claude",
            "rm -f ~/.nvm/versions/node/*/bin/claude-code-updater",
            "sudo rm -f /usr/local/bin/claude",
            "sudo rm -f /usr/local/bin/claude-code-updater",
        ),
    ),
    (
        "Remove aliases from shell config files:",
        (
            "Edit ~/.bashrc, ~/.bash_profile, ~/.zshrc",
            'Remove lines containing "claude-code-updater" or "alias claude="',
        ),
    ),
    (
        "Remove user data (optional):",
        ("rm -rf ~/.claude-code-updater",),
    ),
    (
        "Restart your terminal",
        (),
    ),
)


class CleanupOrchestrator:
    """Runs the full best-effort cleanup sequence.

    Collaborators default to the standard locations under ``home`` and
    can be injected for testing.
    """

    def __init__(
        self,
        home: Path,
        *,
        platform: str | None = None,
        client: NpmClient | None = None,
        shim: ShimReference | None = None,
        command: str = "claude",
        locator: ArtifactLocator | None = None,
        scrubber: AliasScrubber | None = None,
    ) -> None:
        platform = platform or sys.platform
        self._shim = shim or ShimReference()
        self._client = client or NpmClient()
        self._locator = locator or ArtifactLocator.for_home(home, platform)
        self._scrubber = scrubber or AliasScrubber.for_home(
            home, platform, shim=self._shim, command=command
        )
        self._user_data = UserDataManager(home)
        self._verifier = CleanupVerifier(self._client, self._locator, self._scrubber, self._shim)

    @property
    def user_data(self) -> UserDataManager:
        """User data manager for the cleaned home directory."""
        return self._user_data

    def run(self, *, remove_user_data: bool = False) -> CleanupReport:
        """Run every cleanup step, then verify.

        Args:
            remove_user_data: Explicit opt-in to delete the user data directory.

        Returns:
            CleanupReport with per-step results and the verification report.
        """
        uninstalled = self.npm_uninstall()
        binaries = self._locator.remove_known_binaries()
        scrubs = self._scrubber.scrub_shell_configs()
        user_data = self._user_data.maybe_remove_user_data(remove_user_data)
        verification = self._verifier.verify()

        return CleanupReport(
            uninstalled=uninstalled,
            binaries=binaries,
            scrubs=scrubs,
            user_data=user_data,
            verification=verification,
        )

    def npm_uninstall(self) -> bool:
        """Uninstall the shim's npm package.

        Returns:
            True if npm reported success, False otherwise.
        """
        try:
            self._client.uninstall(self._shim.package_name)
        except NpmError as e:
            logger.warning("npm uninstall failed, continuing with manual cleanup: %s", e)
            return False
        return True
