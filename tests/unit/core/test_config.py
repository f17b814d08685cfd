"""Unit tests for UpdaterConfig and load_config."""

from pathlib import Path

import pytest
from ccupdater.core.config import ConfigError, ConfigParseError, UpdaterConfig, load_config
from ccupdater.models.tool import ManagedToolReference
from pydantic import ValidationError


class TestUpdaterConfig:
    """Tests for the UpdaterConfig model."""

    def test_default_values(self) -> None:
        """Defaults describe the Claude Code npm package."""
        config = UpdaterConfig()

        assert config.package == "@anthropic-ai/claude-code"
        assert config.command == "claude"
        assert config.check_updates is True
        assert config.npm_timeout_seconds == 60
        assert config.update_timeout_seconds == 300
        assert config.log_level == "WARNING"

    def test_tool_reference(self) -> None:
        """tool property builds a ManagedToolReference."""
        config = UpdaterConfig(package="some-cli", command="some")

        assert config.tool == ManagedToolReference(registry_name="some-cli", local_command="some")

    def test_rejects_unknown_keys(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            UpdaterConfig(unknown=True)  # type: ignore[call-arg]

    def test_timeout_bounds(self) -> None:
        """Timeouts outside their ranges are rejected."""
        with pytest.raises(ValidationError):
            UpdaterConfig(npm_timeout_seconds=1)
        with pytest.raises(ValidationError):
            UpdaterConfig(update_timeout_seconds=7200)

    def test_empty_command_rejected(self) -> None:
        """An empty command name is rejected."""
        with pytest.raises(ValidationError):
            UpdaterConfig(command="")


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """A missing config file yields default settings."""
        config = load_config(tmp_path / "config.toml")

        assert config == UpdaterConfig()

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values from the TOML file override defaults."""
        path = tmp_path / "config.toml"
        path.write_text('check_updates = false\nlog_level = "DEBUG"\n')

        config = load_config(path)

        assert config.check_updates is False
        assert config.log_level == "DEBUG"
        assert config.command == "claude"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Invalid TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("check_updates = = true")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('log_level = "LOUD"\n')

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)

    def test_uses_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """CLAUDE_CODE_UPDATER_CONFIG points load_config at another file."""
        path = tmp_path / "custom.toml"
        path.write_text('command = "claude-beta"\n')
        monkeypatch.setenv("CLAUDE_CODE_UPDATER_CONFIG", str(path))

        config = load_config()

        assert config.command == "claude-beta"
