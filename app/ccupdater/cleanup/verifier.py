"""Post-cleanup verification.

Re-runs three independent discovery checks once removal has been
attempted. A check that cannot reach a conclusion reports not clean.
"""

import logging
from collections.abc import Callable

from ccupdater.cleanup.aliases import AliasScrubber
from ccupdater.cleanup.artifacts import ArtifactLocator
from ccupdater.models.cleanup import CleanupCheckResult, ShimReference, VerificationReport
from ccupdater.updater.npm import NpmClient, NpmError, NpmNotFoundError

logger = logging.getLogger(__name__)


class CleanupVerifier:
    """Checks package registration, binaries and aliases for residue."""

    def __init__(
        self,
        client: NpmClient,
        locator: ArtifactLocator,
        scrubber: AliasScrubber,
        shim: ShimReference | None = None,
    ) -> None:
        self._client = client
        self._locator = locator
        self._scrubber = scrubber
        self._shim = shim or ShimReference()

    def verify(self) -> VerificationReport:
        """Run all checks.

        Returns:
            VerificationReport with one result per check.
        """
        checks: list[tuple[str, Callable[[str], CleanupCheckResult]]] = [
            ("npm package", self._check_package),
            ("binary files", self._check_binaries),
            ("shell aliases", self._check_aliases),
        ]
        return VerificationReport(results=tuple(_guarded(name, check) for name, check in checks))

    def _check_package(self, name: str) -> CleanupCheckResult:
        try:
            installed = self._client.is_installed(self._shim.package_name)
        except NpmNotFoundError:
            return CleanupCheckResult(name, True, "npm not found; nothing registered")
        except NpmError as e:
            return CleanupCheckResult(name, False, f"Could not determine ({e})")

        if installed:
            return CleanupCheckResult(name, False, "Still installed")
        return CleanupCheckResult(name, True, "Removed")

    def _check_binaries(self, name: str) -> CleanupCheckResult:
        try:
            remaining = self._locator.find_existing()
        except OSError as e:
            return CleanupCheckResult(name, False, f"Could not inspect binary locations ({e})")

        if remaining:
            listing = ", ".join(str(path) for path in remaining)
            return CleanupCheckResult(name, False, f"Some binaries still exist: {listing}")
        return CleanupCheckResult(name, True, "All removed")

    def _check_aliases(self, name: str) -> CleanupCheckResult:
        try:
            remaining = self._scrubber.find_references()
        except (OSError, UnicodeDecodeError) as e:
            return CleanupCheckResult(name, False, f"Could not inspect shell configs ({e})")

        if remaining:
            listing = ", ".join(str(path) for path in remaining)
            return CleanupCheckResult(name, False, f"Some aliases still exist: {listing}")
        return CleanupCheckResult(name, True, "All removed")


def _guarded(name: str, check: Callable[[str], CleanupCheckResult]) -> CleanupCheckResult:
    """Run a check, turning an unexpected failure into a not-clean result."""
    try:
        return check(name)
    except Exception as e:
        logger.warning("Verification check '%s' failed: %s", name, e)
        return CleanupCheckResult(name, False, f"Check failed ({e})")
