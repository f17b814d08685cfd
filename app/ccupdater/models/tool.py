"""Managed tool models for the launcher flow.

This module defines the data structures that describe which external
tool is managed, what the update check decided, and how the resolved
tool is invoked.
"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class ManagedToolReference:
    """Identifies the external package and binary being managed.

    Attributes:
        registry_name: Package name in the npm registry.
        local_command: Command name the package installs on PATH.
    """

    registry_name: str
    local_command: str

    def __post_init__(self) -> None:
        """Validate tool reference after initialization."""
        if not self.registry_name:
            msg = "Registry name cannot be empty"
            raise ValueError(msg)
        if not self.local_command:
            msg = "Local command cannot be empty"
            raise ValueError(msg)

    @property
    def install_hint(self) -> str:
        """Command the user can run to install the managed tool."""
        return f"npm i -g {self.registry_name}"


# Default managed tool: Claude Code
CLAUDE_CODE = ManagedToolReference(
    registry_name="@anthropic-ai/claude-code",
    local_command="claude",
)


class UpdateDecision(Enum):
    """Outcome of the pre-launch version check.

    Attributes:
        UP_TO_DATE: Installed version is the latest.
        UPDATE_AVAILABLE: A newer version exists (or nothing is installed).
        CHECK_FAILED: The check could not be completed.
    """

    UP_TO_DATE = "up_to_date"
    UPDATE_AVAILABLE = "update_available"
    CHECK_FAILED = "check_failed"


@dataclass(frozen=True, slots=True)
class DelegateTarget:
    """Resolved invocation of the managed tool.

    Attributes:
        executable_path: Program to spawn.
        invocation_args: Arguments placed before the forwarded user
            arguments (e.g. the entry script when spawning ``node``).
    """

    executable_path: str
    invocation_args: tuple[str, ...] = field(default_factory=tuple)

    @property
    def command(self) -> list[str]:
        """Full argv prefix for spawning the managed tool."""
        return [self.executable_path, *self.invocation_args]


@dataclass(frozen=True, slots=True)
class LaunchResult:
    """Result of a launcher run.

    Attributes:
        exit_code: Exit code the hosting process should terminate with.
    """

    exit_code: int
