"""Update-check-and-delegate flow for the launcher.

This package decides whether to update the managed tool, resolves its
executable and hands process control to it.
"""

from ccupdater.updater.delegate import ProcessDelegate, forward_signals
from ccupdater.updater.gate import UpdateChecker, UpdatePerformer, VersionGate
from ccupdater.updater.launcher import SKIP_UPDATE_FLAG, Launcher, split_launcher_args
from ccupdater.updater.npm import (
    NpmClient,
    NpmError,
    NpmNotFoundError,
    NpmUpdateChecker,
    UpdateCheckError,
)
from ccupdater.updater.resolver import DelegateNotFoundError, DelegateResolver

__all__ = [
    "SKIP_UPDATE_FLAG",
    "DelegateNotFoundError",
    "DelegateResolver",
    "Launcher",
    "NpmClient",
    "NpmError",
    "NpmNotFoundError",
    "NpmUpdateChecker",
    "ProcessDelegate",
    "UpdateCheckError",
    "UpdateChecker",
    "UpdatePerformer",
    "VersionGate",
    "forward_signals",
    "split_launcher_args",
]
