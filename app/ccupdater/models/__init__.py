"""Data models for ccupdater.

This module exports the core data structures used throughout the application.
"""

from ccupdater.models.cleanup import (
    BinaryRemoval,
    CleanupCheckResult,
    CleanupReport,
    ScrubResult,
    ShimReference,
    UserDataOutcome,
    UserDataResult,
    VerificationReport,
)
from ccupdater.models.tool import (
    DelegateTarget,
    LaunchResult,
    ManagedToolReference,
    UpdateDecision,
)

__all__ = [
    "BinaryRemoval",
    "CleanupCheckResult",
    "CleanupReport",
    "DelegateTarget",
    "LaunchResult",
    "ManagedToolReference",
    "ScrubResult",
    "ShimReference",
    "UpdateDecision",
    "UserDataOutcome",
    "UserDataResult",
    "VerificationReport",
]
