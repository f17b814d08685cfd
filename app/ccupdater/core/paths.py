"""Path management for ccupdater.

All locations are resolved relative to the user's home directory so they
can be redirected in tests by passing an explicit ``home``.

Layout:
- User data: ~/.claude-code-updater/
- Config: ~/.claude-code-updater/config.toml
- Theme: ~/.claude-code-updater/theme.toml
"""

import os
from pathlib import Path

# Directory name of the persisted user data directory
USER_DATA_DIRNAME = ".claude-code-updater"

# Environment variable overriding the config file location
CONFIG_ENV_VAR = "CLAUDE_CODE_UPDATER_CONFIG"


def get_home_dir() -> Path:
    """Get the current user's home directory.

    Returns:
        Path to the home directory.
    """
    return Path.home()


def get_user_data_dir(home: Path | None = None) -> Path:
    """Get the persisted user data directory path.

    Args:
        home: Home directory to resolve against. If None, uses the current user's.

    Returns:
        Path to ~/.claude-code-updater/.
    """
    return (home or get_home_dir()) / USER_DATA_DIRNAME


def get_config_path(home: Path | None = None) -> Path:
    """Get the configuration file path.

    The ``CLAUDE_CODE_UPDATER_CONFIG`` environment variable takes
    precedence over the default location.

    Args:
        home: Home directory to resolve against. If None, uses the current user's.

    Returns:
        Path to the config file.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_user_data_dir(home) / "config.toml"


def get_theme_path(home: Path | None = None) -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.claude-code-updater/theme.toml.
    """
    return get_user_data_dir(home) / "theme.toml"
