"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from hsaroster.core.exceptions import ConfigurationError


class UpstreamConfig(BaseSettings):
    """Roster data API (Airtable-style table endpoint)."""

    model_config = {"env_prefix": "API_", "env_file": ".env", "extra": "ignore"}

    url: str
    key: str
    timeout: int = 30
    max_attempts: int = Field(default=1, ge=1)  # 1 = single shot, no retry
    retry_backoff_seconds: float = Field(default=0.0, ge=0.0)


class ServerConfig(BaseSettings):
    """Inbound HTTP listener."""

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    host: str = "0.0.0.0"
    port: int = 8080


class CacheConfig(BaseSettings):
    """Roster cache configuration."""

    model_config = {"env_prefix": "CACHE_", "env_file": ".env", "extra": "ignore"}

    ttl_seconds: int = 24 * 60 * 60


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "HSA_ROSTER_", "env_file": ".env", "extra": "ignore"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_json: bool = False

    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)


def load_settings() -> AppSettings:
    """Build settings from the environment, failing fast on missing values."""
    try:
        return AppSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
