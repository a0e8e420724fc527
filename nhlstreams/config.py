"""
Configuration management for nhlstreams.

Handles loading, validation, and access to application configuration.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

# Global configuration instance
_config: Optional["NHLStreamsConfig"] = None


class ProbeConfig(BaseModel):
    """Stream resolution probe configuration."""
    host: str = "http://localhost:8080"  # Set to the probe service in config.yaml
    path: str = "/getM3U8.php"
    league: str = "nhl"
    cdn: str = "akc"
    timeout: float = 5.0  # Same as the httpx default


class StatsApiConfig(BaseModel):
    """Statistics service configuration."""
    base_url: str = "https://statsapi.web.nhl.com/api/v1"
    timeout: float = 30.0


class PlaylistConfig(BaseModel):
    """Playlist generation configuration."""
    broadcast_category: str = "NHLTV"  # EPG title whose feeds are probed
    timezone: Optional[str] = None  # IANA name, None = local zone of the process


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "WARNING"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class NHLStreamsConfig(BaseModel):
    """Main nhlstreams configuration."""
    probe: ProbeConfig = Field(default_factory=ProbeConfig)
    stats_api: StatsApiConfig = Field(default_factory=StatsApiConfig)
    playlist: PlaylistConfig = Field(default_factory=PlaylistConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> NHLStreamsConfig:
    """
    Load configuration from file.

    Args:
        config_path: Path to config file. Defaults to config.yaml in the
            working directory or project root.

    Returns:
        Loaded and validated configuration.

    Raises:
        FileNotFoundError: If an explicitly given config_path does not exist
    """
    global _config

    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    if config_path is None:
        possible_paths = [
            Path("config.yaml"),
            Path(__file__).parent.parent / "config.yaml",
        ]
        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data: dict[str, Any] = {}

    if config_path:
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}

    env_overrides = _get_env_overrides()
    _deep_merge(config_data, env_overrides)

    _config = NHLStreamsConfig(**config_data)
    return _config


def get_config() -> NHLStreamsConfig:
    """
    Get the current configuration.

    Returns:
        Current configuration (loads default if not yet loaded).
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> NHLStreamsConfig:
    """Reload configuration from disk."""
    global _config
    _config = None
    return load_config()


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    env_map = {
        "NHLSTREAMS_PROBE_HOST": ("probe", "host"),
        "NHLSTREAMS_PROBE_TIMEOUT": ("probe", "timeout"),
        "NHLSTREAMS_STATS_API_URL": ("stats_api", "base_url"),
        "NHLSTREAMS_BROADCAST_CATEGORY": ("playlist", "broadcast_category"),
        "NHLSTREAMS_TIMEZONE": ("playlist", "timezone"),
        "NHLSTREAMS_LOG_LEVEL": ("logging", "level"),
        "NHLSTREAMS_LOG_FILE": ("logging", "file"),
    }

    for env_var, path in env_map.items():
        value = os.environ.get(env_var)
        if value is not None:
            _set_nested(overrides, path, _parse_env_value(value))

    return overrides


def _parse_env_value(value: str) -> Any:
    """Parse environment variable value to appropriate type."""
    if value.lower() in ("true", "yes"):
        return True
    if value.lower() in ("false", "no"):
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


def _set_nested(d: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    """Set a nested dictionary value from a path tuple."""
    for key in path[:-1]:
        d = d.setdefault(key, {})
    d[path[-1]] = value


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    """Deep merge override into base dictionary."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value

