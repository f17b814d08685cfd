"""Unit tests for ccupdater path helpers."""

from pathlib import Path

import pytest
from ccupdater.core.paths import (
    USER_DATA_DIRNAME,
    get_config_path,
    get_theme_path,
    get_user_data_dir,
)


class TestUserDataDir:
    """Tests for get_user_data_dir."""

    def test_under_given_home(self, tmp_path: Path) -> None:
        """User data dir is resolved under the given home."""
        assert get_user_data_dir(tmp_path) == tmp_path / ".claude-code-updater"

    def test_defaults_to_current_home(self) -> None:
        """Without a home argument the current user's home is used."""
        assert get_user_data_dir() == Path.home() / USER_DATA_DIRNAME


class TestConfigPath:
    """Tests for get_config_path."""

    def test_default_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Config lives inside the user data directory."""
        monkeypatch.delenv("CLAUDE_CODE_UPDATER_CONFIG", raising=False)

        assert get_config_path(tmp_path) == tmp_path / USER_DATA_DIRNAME / "config.toml"

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variable overrides the default location."""
        monkeypatch.setenv("CLAUDE_CODE_UPDATER_CONFIG", str(tmp_path / "x.toml"))

        assert get_config_path() == tmp_path / "x.toml"


def test_theme_path(tmp_path: Path) -> None:
    """Theme overrides live inside the user data directory."""
    assert get_theme_path(tmp_path) == tmp_path / USER_DATA_DIRNAME / "theme.toml"
