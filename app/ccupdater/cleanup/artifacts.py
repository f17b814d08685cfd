"""Binary artifact discovery and removal.

Holds the static table of locations where the shim (or the aliases it
created) may have left executables, and removes them best-effort.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from ccupdater.cleanup.patterns import WILDCARD, PathPattern
from ccupdater.models.cleanup import BinaryRemoval

logger = logging.getLogger(__name__)

# Executable names the shim may have installed
BINARY_NAMES: tuple[str, ...] = ("claude", "claude-code-updater")


@dataclass(frozen=True, slots=True)
class ArtifactCandidate:
    """A known install location, literal or single-wildcard.

    Attributes:
        pattern: Path string, possibly with one ``*`` segment.
    """

    pattern: str

    @property
    def is_glob(self) -> bool:
        """Check if this candidate has a variable path segment."""
        return WILDCARD in self.pattern

    def to_path_pattern(self) -> PathPattern:
        """Parse into a PathPattern."""
        return PathPattern.parse(self.pattern)


def default_candidates(home: Path, platform: str | None = None) -> tuple[ArtifactCandidate, ...]:
    """Build the candidate table for a platform.

    Args:
        home: User home directory.
        platform: ``sys.platform`` style identifier. If None, uses the
            running platform.

    Returns:
        Tuple of candidates in removal order.
    """
    platform = platform or sys.platform

    if platform == "win32":
        npm_dir = home / "AppData" / "Roaming" / "npm"
        return tuple(ArtifactCandidate(str(npm_dir / f"{name}.cmd")) for name in BINARY_NAMES)

    nvm_bin = home / ".nvm" / "versions" / "node" / WILDCARD / "bin"
    candidates = [ArtifactCandidate(str(nvm_bin / name)) for name in BINARY_NAMES]
    candidates.extend(ArtifactCandidate(f"/usr/local/bin/{name}") for name in BINARY_NAMES)
    return tuple(candidates)


class ArtifactLocator:
    """Finds and removes binaries at the candidate locations.

    Every path is handled independently; an error on one path is recorded
    on its result and never stops the remaining candidates.
    """

    def __init__(self, candidates: tuple[ArtifactCandidate, ...]) -> None:
        self._candidates = candidates

    @classmethod
    def for_home(cls, home: Path, platform: str | None = None) -> "ArtifactLocator":
        """Create a locator with the default candidate table."""
        return cls(default_candidates(home, platform))

    @property
    def candidates(self) -> tuple[ArtifactCandidate, ...]:
        """Candidate table this locator works on."""
        return self._candidates

    def remove_known_binaries(self) -> list[BinaryRemoval]:
        """Remove every existing binary at the candidate locations.

        Returns:
            One BinaryRemoval per existing path (or per candidate whose
            expansion failed). Paths that do not exist produce no result.
        """
        results: list[BinaryRemoval] = []

        for candidate in self._candidates:
            pattern = candidate.to_path_pattern()
            try:
                paths = list(pattern.expand())
            except OSError as e:
                logger.warning("Could not list %s: %s", pattern.prefix, e)
                results.append(BinaryRemoval(path=pattern.prefix, removed=False, error=str(e)))
                continue

            for path in paths:
                result = _remove_single(path)
                if result is not None:
                    results.append(result)

        return results

    def find_existing(self) -> list[Path]:
        """List candidate paths that currently exist.

        Raises:
            OSError: If a wildcard prefix exists but cannot be listed.
        """
        existing: list[Path] = []
        for candidate in self._candidates:
            for path in candidate.to_path_pattern().expand():
                if _exists(path):
                    existing.append(path)
        return existing


def _exists(path: Path) -> bool:
    """Check existence, counting dangling symlinks as present."""
    return path.exists() or path.is_symlink()


def _remove_single(path: Path) -> BinaryRemoval | None:
    """Remove one binary path.

    Returns:
        BinaryRemoval, or None if the path does not exist.
    """
    try:
        if not _exists(path):
            return None
        path.unlink()
    except OSError as e:
        logger.warning("Could not remove %s: %s", path, e)
        return BinaryRemoval(path=path, removed=False, error=str(e))

    logger.info("Removed %s", path)
    return BinaryRemoval(path=path, removed=True)
