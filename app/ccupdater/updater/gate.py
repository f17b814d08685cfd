"""Version gate and update performer.

Both steps are best-effort: the managed tool must launch even when the
registry is unreachable or the update itself fails.
"""

import logging
from typing import Protocol

from ccupdater.models.tool import UpdateDecision

logger = logging.getLogger(__name__)


class UpdateChecker(Protocol):
    """Capability that knows whether and how to update the managed tool."""

    def has_update(self) -> bool:
        """Return True if a newer version exists. May raise."""
        ...

    def update(self) -> None:
        """Install the newer version. May raise."""
        ...


class VersionGate:
    """Decides whether an update should run before launching."""

    def __init__(self, checker: UpdateChecker) -> None:
        self._checker = checker

    def decide(self) -> UpdateDecision:
        """Query the update checker and map the answer to a decision.

        Any failure of the checker maps to CHECK_FAILED.

        Returns:
            UpdateDecision for this invocation.
        """
        try:
            available = self._checker.has_update()
        except Exception as e:
            logger.warning("Update check failed: %s", e)
            return UpdateDecision.CHECK_FAILED

        if available:
            return UpdateDecision.UPDATE_AVAILABLE
        return UpdateDecision.UP_TO_DATE


class UpdatePerformer:
    """Applies an available update without ever aborting the launch."""

    def __init__(self, checker: UpdateChecker) -> None:
        self._checker = checker

    def apply(self) -> bool:
        """Install the newer version.

        Returns:
            True if the update succeeded, False if it failed.
        """
        try:
            self._checker.update()
        except Exception as e:
            logger.warning("Update failed, continuing with installed version: %s", e)
            return False
        return True
