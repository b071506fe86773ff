"""
Settings Management Module

Provides pydantic-based configuration management with:
- YAML configuration file loading
- Environment variable overrides (VIDMETA_*, nested with "__")
- Multi-environment support (dev, prod, test)
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import VidmetaConfigError


DEFAULT_STATIC_INSTANCES = (
    "https://inv.nadeko.net",
    "https://invidious.nerdvpn.de",
    "https://yewtu.be",
    "https://y.com.sb",
    "https://yt.artemislena.eu",
)


class HttpSettings(BaseModel):
    """HTTP client configuration settings."""

    timeout: float = Field(default=10.0, gt=0)
    max_connections: int = 20
    max_keepalive_connections: int = 10
    keepalive_expiry: float = 5.0
    follow_redirects: bool = True
    verify_ssl: bool = True
    user_agent: str | None = None


class SearchSettings(BaseModel):
    """External search tool configuration."""

    binary: str = "yt-dlp"
    engine: str = "ytsearch"
    page_size: int = Field(default=20, ge=1)
    timeout: float = Field(default=60.0, gt=0)
    extra_args: list[str] = Field(default_factory=list)


class MirrorSettings(BaseModel):
    """Mirror directory and trending configuration."""

    directory_url: str = "https://api.invidious.io/instances.json"
    directory_sort: str = "type,users"
    health_threshold: float = Field(default=95.0, ge=0.0, le=100.0)
    static_instances: list[str] = Field(
        default_factory=lambda: list(DEFAULT_STATIC_INSTANCES), min_length=1
    )
    trending_path: str = "/api/v1/trending"
    trending_type: str = "music"


class SuggestSettings(BaseModel):
    """Autocomplete endpoint configuration."""

    url: str = "http://suggestqueries.google.com/complete/search"
    client: str = "firefox"
    ds: str = "yt"


class Settings(BaseSettings):
    """
    Main application settings with multi-environment support.

    Configuration hierarchy:
    1. Built-in defaults
    2. Environment variables (VIDMETA_*, e.g. VIDMETA_HTTP__TIMEOUT=5)
    3. settings/config.yaml and settings/config.{environment}.yaml,
       deep-merged, when a file is loaded through load_from_yaml

    Examples:
        >>> settings = get_settings()
        >>> settings.search.page_size
        20
        >>> settings.http.timeout
        10.0
    """

    model_config = SettingsConfigDict(
        env_prefix="VIDMETA_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = "development"
    log_level: str = "INFO"
    log_json: bool = False

    http: HttpSettings = Field(default_factory=HttpSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    mirrors: MirrorSettings = Field(default_factory=MirrorSettings)
    suggest: SuggestSettings = Field(default_factory=SuggestSettings)

    @classmethod
    def load_from_yaml(cls, config_path: Path | None = None) -> "Settings":
        """
        Load settings from a YAML configuration file.

        Args:
            config_path: Path to config file (default: settings/config.yaml
                relative to the working directory)

        Returns:
            Settings instance

        Raises:
            VidmetaConfigError: If the file is not valid YAML or fails validation
        """
        if config_path is None:
            config_path = Path.cwd() / "settings" / "config.yaml"

        if not config_path.exists():
            return cls()

        config_data = cls._read_yaml(config_path)

        env = os.getenv("VIDMETA_ENVIRONMENT", config_data.get("environment", "development"))
        env_config_path = config_path.parent / f"config.{env}.yaml"
        if env_config_path.exists():
            config_data = cls._deep_merge(config_data, cls._read_yaml(env_config_path))

        try:
            return cls(**config_data)
        except ValidationError as e:
            raise VidmetaConfigError(
                f"Invalid configuration: {e.error_count()} error(s)",
                config_path=str(config_path),
            ) from e

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any]:
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise VidmetaConfigError("Malformed YAML", config_path=str(path)) from e
        if not isinstance(data, dict):
            raise VidmetaConfigError(
                "Top-level YAML value must be a mapping", config_path=str(path)
            )
        return data

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = Settings._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


@lru_cache
def get_settings(config_path: Path | None = None) -> Settings:
    """
    Get cached settings instance.

    Args:
        config_path: Optional path to config file

    Returns:
        Settings instance
    """
    return Settings.load_from_yaml(config_path)


def reload_settings() -> Settings:
    """Reload settings by clearing cache."""
    get_settings.cache_clear()
    return get_settings()


__all__ = [
    "DEFAULT_STATIC_INSTANCES",
    "HttpSettings",
    "SearchSettings",
    "MirrorSettings",
    "SuggestSettings",
    "Settings",
    "get_settings",
    "reload_settings",
]
