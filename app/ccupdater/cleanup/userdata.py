"""User data directory handling.

The persisted ~/.claude-code-updater directory is only deleted on
explicit opt-in; binaries and aliases are removed unconditionally.
"""

import logging
import shutil
from pathlib import Path

from ccupdater.core.paths import get_user_data_dir
from ccupdater.models.cleanup import UserDataOutcome, UserDataResult

logger = logging.getLogger(__name__)


class UserDataManager:
    """Conditionally removes the persisted user data directory."""

    def __init__(self, home: Path) -> None:
        self._path = get_user_data_dir(home)

    @property
    def path(self) -> Path:
        """Location of the user data directory."""
        return self._path

    def exists(self) -> bool:
        """Check if the user data directory exists."""
        return self._path.exists() or self._path.is_symlink()

    def maybe_remove_user_data(self, remove: bool) -> UserDataResult:
        """Remove the user data directory if explicitly requested.

        Args:
            remove: Explicit opt-in to delete the directory.

        Returns:
            UserDataResult describing what happened.
        """
        if not self.exists():
            return UserDataResult(outcome=UserDataOutcome.NOT_FOUND, path=self._path)

        if not remove:
            logger.debug("Preserving user data at %s", self._path)
            return UserDataResult(outcome=UserDataOutcome.PRESERVED, path=self._path)

        try:
            if self._path.is_dir() and not self._path.is_symlink():
                shutil.rmtree(self._path)
            else:
                self._path.unlink()
        except OSError as e:
            logger.warning("Could not remove user data %s: %s", self._path, e)
            return UserDataResult(outcome=UserDataOutcome.FAILED, path=self._path, error=str(e))

        logger.info("Removed user data directory %s", self._path)
        return UserDataResult(outcome=UserDataOutcome.REMOVED, path=self._path)
