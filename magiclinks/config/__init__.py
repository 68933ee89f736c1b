from .provider import (
    ConfigProvider,
    EnvConfigProvider,
    LoggingConfig,
    MagicLinkConfig,
    StoreConfig,
)

__all__ = [
    "ConfigProvider",
    "EnvConfigProvider",
    "LoggingConfig",
    "MagicLinkConfig",
    "StoreConfig",
]
