"""
Shared configuration management for the cache layer.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CACHE_",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")


class CacheConfig(BaseConfig):
    """Redis cache configuration."""

    # Connection
    redis_url: str = Field(default="redis://localhost:6379/0")
    redis_socket_timeout: float = Field(default=5.0, gt=0)
    redis_socket_connect_timeout: float = Field(default=5.0, gt=0)
    redis_health_check_interval: int = Field(default=30, ge=0)

    # Key enumeration
    scan_count: Optional[int] = Field(default=None, ge=1)
    scan_max_iterations: int = Field(default=100_000, ge=1)


def get_config(**overrides) -> CacheConfig:
    """Get cache configuration, environment first, then explicit overrides."""
    return CacheConfig(**overrides)
