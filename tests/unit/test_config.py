"""Unit tests for configuration defaults and validation."""

from __future__ import annotations

from pathlib import Path

import platformdirs
import pytest
from pydantic import ValidationError

from plugindetails.config import (
    _DEFAULT_DATA_DIR,
    _DEFAULT_DB_PATH,
    CacheSettings,
    GithubSettings,
    PluginSettings,
    Settings,
)


class TestDefaults:
    def test_default_data_dir_matches_platformdirs(self) -> None:
        assert platformdirs.user_data_dir("plugindetails") == _DEFAULT_DATA_DIR

    def test_default_db_path_under_data_dir(self) -> None:
        assert _DEFAULT_DB_PATH.startswith(_DEFAULT_DATA_DIR)
        assert _DEFAULT_DB_PATH.endswith("cache.db")
        assert CacheSettings().db_path == _DEFAULT_DB_PATH

    def test_update_check_defaults(self) -> None:
        github = GithubSettings()
        assert github.timeout_seconds == 10
        assert github.ttl_hours == 12
        assert github.repo_url == "https://github.com/guilamu/mini-plugin"


class TestPluginSettings:
    def test_plugin_file_uses_directory_name(self, tmp_path: Path) -> None:
        plugin_dir = tmp_path / "mini-plugin"
        plugin_dir.mkdir()
        plugin = PluginSettings(plugin_dir=str(plugin_dir))
        assert plugin.plugin_file == "mini-plugin/miniplugin.php"

    def test_paths(self, tmp_path: Path) -> None:
        plugin = PluginSettings(plugin_dir=str(tmp_path), readme_file="readme.md")
        assert plugin.readme_path == tmp_path / "readme.md"
        assert plugin.main_file_path == tmp_path / "miniplugin.php"


class TestEnvironment:
    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PLUGINDETAILS__GITHUB__REPO", "other-plugin")
        monkeypatch.setenv("PLUGINDETAILS__GITHUB__TTL_HOURS", "1")
        settings = Settings()
        assert settings.github.repo == "other-plugin"
        assert settings.github.ttl_hours == 1

    def test_constructor_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PLUGINDETAILS__LOGGING__LEVEL", "ERROR")
        assert Settings(logging={"level": "DEBUG"}).logging.level == "DEBUG"


class TestConfigValidation:
    def test_wrong_type_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Settings(github={"timeout_seconds": "soon"})  # type: ignore[arg-type]

    def test_unknown_top_level_field_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Settings(completely_unknown_field="oops")  # type: ignore[call-arg]

    def test_unknown_nested_field_raises_validation_error(self) -> None:
        """A typo like 'ownr' is caught rather than silently using the default."""
        with pytest.raises(ValidationError):
            GithubSettings(ownr="someone")  # type: ignore[call-arg]

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(logging={"level": "LOUD"})
