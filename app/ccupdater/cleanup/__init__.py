"""Best-effort cleanup of everything the shim may have installed.

This package removes binaries, shell aliases and the user data
directory, then verifies that nothing is left behind.
"""

from ccupdater.cleanup.aliases import AliasScrubber, ShellProfileTarget, default_profile_targets
from ccupdater.cleanup.artifacts import ArtifactCandidate, ArtifactLocator, default_candidates
from ccupdater.cleanup.dialects import (
    FishDialect,
    PosixShellDialect,
    PowerShellDialect,
    ShellDialect,
)
from ccupdater.cleanup.orchestrator import MANUAL_INSTRUCTIONS, CleanupOrchestrator
from ccupdater.cleanup.patterns import PathPattern
from ccupdater.cleanup.userdata import UserDataManager
from ccupdater.cleanup.verifier import CleanupVerifier

__all__ = [
    "MANUAL_INSTRUCTIONS",
    "AliasScrubber",
    "ArtifactCandidate",
    "ArtifactLocator",
    "CleanupOrchestrator",
    "CleanupVerifier",
    "FishDialect",
    "PathPattern",
    "PosixShellDialect",
    "PowerShellDialect",
    "ShellDialect",
    "ShellProfileTarget",
    "UserDataManager",
    "default_candidates",
    "default_profile_targets",
]
