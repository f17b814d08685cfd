"""Updater configuration and settings.

This module provides the configuration model and loader for the
launcher. Configuration is optional: when no file exists, defaults
describe the Claude Code npm package.

Configuration is stored in ~/.claude-code-updater/config.toml
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ccupdater.core.paths import get_config_path
from ccupdater.models.tool import CLAUDE_CODE, ManagedToolReference

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class UpdaterConfig(BaseModel):
    """Configuration for the update-and-launch shim.

    Attributes:
        package: Registry name of the managed npm package.
        command: Local command name the package installs.
        check_updates: Whether to check for updates before launching.
        npm_timeout_seconds: Timeout for npm queries (root, ls, view).
        update_timeout_seconds: Timeout for ``npm install -g``.
        log_level: Logging level for diagnostic output.
    """

    model_config = ConfigDict(extra="forbid")

    package: Annotated[
        str,
        Field(min_length=1, description="Registry name of the managed package"),
    ] = CLAUDE_CODE.registry_name
    command: Annotated[
        str,
        Field(min_length=1, description="Local command name of the managed tool"),
    ] = CLAUDE_CODE.local_command
    check_updates: Annotated[
        bool,
        Field(description="Check for a newer version before launching"),
    ] = True
    npm_timeout_seconds: Annotated[
        int,
        Field(ge=5, le=600, description="Timeout for npm queries (5-600)"),
    ] = 60
    update_timeout_seconds: Annotated[
        int,
        Field(ge=30, le=3600, description="Timeout for npm install (30-3600)"),
    ] = 300
    log_level: Annotated[
        LogLevel,
        Field(description="Logging level"),
    ] = "WARNING"

    @property
    def tool(self) -> ManagedToolReference:
        """Get the managed tool reference described by this config."""
        return ManagedToolReference(registry_name=self.package, local_command=self.command)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> UpdaterConfig:
    """Load updater configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated UpdaterConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return UpdaterConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return UpdaterConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e
