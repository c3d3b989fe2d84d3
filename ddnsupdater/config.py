"""Configuration management for the DDNS updater."""

from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict


class UpdaterSettings(BaseSettings):
    """Environment variables controlling the updater itself."""

    model_config = SettingsConfigDict(env_prefix="DDNS_", env_file=".env")

    http_timeout: float = 10.0  # Seconds, applied to the whole HTTP exchange
    log_level: str = "INFO"


def load_settings() -> UpdaterSettings:
    """Load updater settings from .env and environment variables."""
    return UpdaterSettings()


def load_provider_block(path: Path) -> dict[str, Any]:
    """Load one provider specific settings block from a YAML file.

    The block is returned untyped; the provider decodes it.
    """
    if not path.exists():
        raise FileNotFoundError(f"Provider settings file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Provider settings in {path} must be a mapping")
    return data
