"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Protocol

MAGIC_TTL = 30 * 24 * 60 * 60  # 30 days


@dataclass
class StoreConfig:
    """Key-value store configuration."""
    redis_url: str


@dataclass
class MagicLinkConfig:
    """Magic link token configuration."""
    ttl_seconds: int


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_store_config(self) -> StoreConfig:
        """Get store configuration."""
        ...

    def get_magic_link_config(self) -> MagicLinkConfig:
        """Get magic link configuration."""
        ...

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_store_config(self) -> StoreConfig:
        """Get store configuration from environment variables."""
        return StoreConfig(
            redis_url=os.getenv("REDIS_URL", "redis://localhost:6379/0")
        )

    def get_magic_link_config(self) -> MagicLinkConfig:
        """Get magic link configuration from environment variables."""
        ttl_env = os.getenv("MAGIC_LINK_TTL", str(MAGIC_TTL))
        try:
            ttl_seconds = int(ttl_env)
        except ValueError:
            raise ValueError(
                f"MAGIC_LINK_TTL must be an integer number of seconds, got {ttl_env!r}"
            ) from None

        if ttl_seconds <= 0:
            raise ValueError(f"MAGIC_LINK_TTL must be positive, got {ttl_seconds}")

        return MagicLinkConfig(ttl_seconds=ttl_seconds)

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
