"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (PLUGINDETAILS__GITHUB__OWNER=someone)
  2. plugindetails.yaml     (searched in cwd, then the platform config dir)
  3. Hardcoded defaults

The config file is optional — all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_DATA_DIR = platformdirs.user_data_dir("plugindetails")
_DEFAULT_DB_PATH = str(Path(_DEFAULT_DATA_DIR) / "cache.db")


def _find_config_file() -> str | None:
    """Return the path of the first plugindetails.yaml found, or None."""
    candidates = [
        Path("plugindetails.yaml"),
        Path(platformdirs.user_config_dir("plugindetails")) / "plugindetails.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class PluginSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    slug: str = "miniplugin"
    plugin_dir: str = "."
    main_file: str = "miniplugin.php"
    readme_file: str = "README.md"
    display_name: str = "Mini Plugin"
    # Host admin base URL used to build the "View details" link.
    admin_url: str = "/wp-admin/"
    # Reported as "tested up to" in the information payload.
    host_version: str = ""

    @property
    def plugin_file(self) -> str:
        """Plugin identifier relative to the plugins directory: ``<dir>/<main file>``."""
        return f"{Path(self.plugin_dir).resolve().name}/{self.main_file}"

    @property
    def main_file_path(self) -> Path:
        return Path(self.plugin_dir) / self.main_file

    @property
    def readme_path(self) -> Path:
        return Path(self.plugin_dir) / self.readme_file


class GithubSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    owner: str = "guilamu"
    repo: str = "mini-plugin"
    api_base: str = "https://api.github.com"
    timeout_seconds: float = 10.0
    ttl_hours: int = 12

    @property
    def repo_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"


class CacheSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    db_path: str = _DEFAULT_DB_PATH
    cleanup_grace_days: int = 7


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: PLUGINDETAILS__GITHUB__REPO=other
        env_prefix="PLUGINDETAILS__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    plugin: PluginSettings = PluginSettings()
    github: GithubSettings = GithubSettings()
    cache: CacheSettings = CacheSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
