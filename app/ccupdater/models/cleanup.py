"""Cleanup models for artifact removal and verification.

This module defines the result structures produced by each cleanup
step. Results are printed and discarded; nothing here is persisted.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ShimReference:
    """Identifies the shim's own installation footprint.

    Attributes:
        package_name: npm package name the shim was distributed as.
        marker: Comment line written next to shell aliases at install time.
    """

    package_name: str = "claude-code-updater"
    marker: str = "# Added by claude-code-updater"


@dataclass(frozen=True, slots=True)
class BinaryRemoval:
    """Result of removing a single binary path.

    Attributes:
        path: Path that was operated on.
        removed: Whether the file was deleted.
        error: Error message if removal failed, None otherwise.
    """

    path: Path
    removed: bool
    error: str | None = None


@dataclass(frozen=True, slots=True)
class ScrubResult:
    """Result of scrubbing a single shell configuration file.

    Attributes:
        path: Configuration file that was processed.
        modified: Whether the file was rewritten.
        error: Error message if reading or writing failed, None otherwise.
    """

    path: Path
    modified: bool
    error: str | None = None


class UserDataOutcome(Enum):
    """Outcome of the user data step.

    Attributes:
        REMOVED: Directory was deleted.
        PRESERVED: Directory exists and was kept (no opt-in).
        NOT_FOUND: Directory does not exist.
        FAILED: Deletion was requested but failed.
    """

    REMOVED = "removed"
    PRESERVED = "preserved"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class UserDataResult:
    """Result of the user data step.

    Attributes:
        outcome: What happened to the directory.
        path: Location of the user data directory.
        error: Error message for FAILED outcomes, None otherwise.
    """

    outcome: UserDataOutcome
    path: Path
    error: str | None = None


@dataclass(frozen=True, slots=True)
class CleanupCheckResult:
    """Result of one post-cleanup verification check.

    Attributes:
        name: Verification dimension (e.g. "binary files").
        clean: True only when the check positively found no residue.
        message: Human-readable detail.
    """

    name: str
    clean: bool
    message: str


@dataclass(frozen=True, slots=True)
class VerificationReport:
    """Aggregated verification verdict.

    Attributes:
        results: One result per check, in execution order.
    """

    results: tuple[CleanupCheckResult, ...]

    @property
    def all_clean(self) -> bool:
        """True when every check reported clean."""
        return all(result.clean for result in self.results)


@dataclass(frozen=True, slots=True)
class CleanupReport:
    """Everything a cleanup run did.

    Attributes:
        uninstalled: Whether ``npm uninstall`` succeeded.
        binaries: Per-path binary removal results.
        scrubs: Per-file shell profile results.
        user_data: Result of the user data step.
        verification: Post-cleanup verification report.
    """

    uninstalled: bool
    binaries: list[BinaryRemoval] = field(default_factory=list)
    scrubs: list[ScrubResult] = field(default_factory=list)
    user_data: UserDataResult | None = None
    verification: VerificationReport | None = None

    @property
    def files_modified(self) -> int:
        """Number of binaries removed plus shell profiles rewritten."""
        removed = sum(1 for b in self.binaries if b.removed)
        rewritten = sum(1 for s in self.scrubs if s.modified)
        return removed + rewritten

    @property
    def all_clean(self) -> bool:
        """True when verification ran and reported clean."""
        return self.verification is not None and self.verification.all_clean
