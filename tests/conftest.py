"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
from pathlib import Path

import pytest
from ccupdater.models.cleanup import ShimReference
from ccupdater.models.tool import ManagedToolReference


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Empty fake home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def tool() -> ManagedToolReference:
    """Default managed tool reference."""
    return ManagedToolReference(registry_name="@anthropic-ai/claude-code", local_command="claude")


@pytest.fixture
def shim() -> ShimReference:
    """Default shim footprint."""
    return ShimReference()


@pytest.fixture
def npm_ls_installed() -> str:
    """``npm ls -g --json`` output with the managed tool installed."""
    return json.dumps(
        {
            "name": "lib",
            "dependencies": {"@anthropic-ai/claude-code": {"version": "1.0.30"}},
        }
    )


@pytest.fixture
def npm_ls_empty() -> str:
    """``npm ls -g --json`` output for a package that is not installed."""
    return "{}"


@pytest.fixture
def posix_profile_lines() -> list[str]:
    """Shell profile containing shim-installed lines among user lines."""
    return [
        "export PATH=$HOME/.local/bin:$PATH",
        "# Added by claude-code-updater",
        'alias claude="node x.js"',
        "export EDITOR=vim",
    ]
