"""Shell alias scrubbing.

Removes the lines the shim added to shell and profile configuration
files. Each file is processed independently: missing files are skipped,
and a read or write failure is recorded without stopping the rest.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from ccupdater.cleanup.dialects import (
    FishDialect,
    PosixShellDialect,
    PowerShellDialect,
    ShellDialect,
)
from ccupdater.models.cleanup import ScrubResult, ShimReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ShellProfileTarget:
    """A shell configuration file and the dialect used to scrub it.

    Attributes:
        path: Configuration file location.
        dialect: Dialect that knows the file's syntax.
    """

    path: Path
    dialect: ShellDialect


def default_profile_targets(
    home: Path,
    platform: str | None = None,
    *,
    shim: ShimReference | None = None,
    command: str = "claude",
) -> tuple[ShellProfileTarget, ...]:
    """Build the list of shell configuration files for a platform.

    POSIX and Fish files are checked everywhere (Git Bash and WSL share
    them on Windows); PowerShell profiles only on Windows.

    Args:
        home: User home directory.
        platform: ``sys.platform`` style identifier. If None, uses the
            running platform.
        shim: Shim footprint. Defaults to ShimReference().
        command: Local command name the shim aliased.

    Returns:
        Tuple of targets in processing order.
    """
    platform = platform or sys.platform
    shim = shim or ShimReference()

    posix = PosixShellDialect(shim, command)
    targets = [
        ShellProfileTarget(home / ".bashrc", posix),
        ShellProfileTarget(home / ".bash_profile", posix),
        ShellProfileTarget(home / ".zshrc", posix),
        ShellProfileTarget(home / ".config" / "fish" / "config.fish", FishDialect(shim, command)),
    ]

    if platform == "win32":
        powershell = PowerShellDialect(shim, command)
        documents = home / "Documents"
        targets.extend(
            [
                ShellProfileTarget(documents / "PowerShell" / "profile.ps1", powershell),
                ShellProfileTarget(documents / "WindowsPowerShell" / "profile.ps1", powershell),
            ]
        )

    return tuple(targets)


def _read_text(path: Path) -> str:
    """Read a file without translating line endings."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, content: str) -> None:
    """Write a file without translating line endings."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


class AliasScrubber:
    """Removes shim-installed lines from shell configuration files."""

    def __init__(self, targets: tuple[ShellProfileTarget, ...]) -> None:
        self._targets = targets

    @classmethod
    def for_home(
        cls,
        home: Path,
        platform: str | None = None,
        *,
        shim: ShimReference | None = None,
        command: str = "claude",
    ) -> "AliasScrubber":
        """Create a scrubber with the default profile targets."""
        return cls(default_profile_targets(home, platform, shim=shim, command=command))

    @property
    def targets(self) -> tuple[ShellProfileTarget, ...]:
        """Profile targets this scrubber works on."""
        return self._targets

    def scrub_shell_configs(self) -> list[ScrubResult]:
        """Scrub every existing configuration file.

        Returns:
            One ScrubResult per existing file, in target order.
        """
        results: list[ScrubResult] = []
        for target in self._targets:
            result = self._scrub_single(target)
            if result is not None:
                results.append(result)
        return results

    def _scrub_single(self, target: ShellProfileTarget) -> ScrubResult | None:
        """Scrub one file, rewriting it only if something was removed.

        Returns:
            ScrubResult, or None if the file does not exist.
        """
        try:
            if not target.path.is_file():
                return None
            content = _read_text(target.path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", target.path, e)
            return ScrubResult(path=target.path, modified=False, error=str(e))

        scrubbed = target.dialect.scrub(content)
        if scrubbed == content:
            return ScrubResult(path=target.path, modified=False)

        try:
            _write_text(target.path, scrubbed)
        except OSError as e:
            logger.warning("Could not rewrite %s: %s", target.path, e)
            return ScrubResult(path=target.path, modified=False, error=str(e))

        logger.info("Cleaned %s aliases from %s", target.dialect.name, target.path)
        return ScrubResult(path=target.path, modified=True)

    def find_references(self) -> list[Path]:
        """List existing configuration files that still reference the shim.

        Raises:
            OSError: If an existing file cannot be read.
            UnicodeDecodeError: If an existing file is not valid UTF-8.
        """
        return [
            target.path
            for target in self._targets
            if target.path.is_file() and target.dialect.references(_read_text(target.path))
        ]
