"""
Magic Link Factory following Black Box Design principles.

This factory:
- Constructs the magic link module based on configuration
- Wires the store dependency in explicitly
- Returns only the module facade (hiding the storage adapter)
"""

import logging
from typing import Any

from ...config.provider import ConfigProvider
from ..storage.kv import KVStore, RedisKVStore
from .magic_link import MAGIC_TTL, MagicLinkModule

logger = logging.getLogger(__name__)


class MagicLinkFactory:
    """
    Factory for building the magic link module.

    This is the composition root that:
    - Creates the store adapter
    - Injects it into the module
    - Returns only the public interface
    """

    @staticmethod
    def build(config_provider: ConfigProvider, redis_client: Any) -> MagicLinkModule:
        """
        Build a Redis-backed magic link module.

        Args:
            config_provider: Configuration provider
            redis_client: Async Redis client

        Returns:
            MagicLinkModule
        """
        magic_config = config_provider.get_magic_link_config()
        logger.info(f"Building magic link module with {magic_config.ttl_seconds}s token TTL")
        return MagicLinkModule(RedisKVStore(redis_client), ttl_seconds=magic_config.ttl_seconds)

    @staticmethod
    def build_for_testing(store: KVStore, ttl_seconds: int = MAGIC_TTL) -> MagicLinkModule:
        """
        Build the module over an arbitrary store (e.g. an in-memory fake).

        Args:
            store: Any KVStore implementation
            ttl_seconds: Token TTL

        Returns:
            MagicLinkModule
        """
        return MagicLinkModule(store, ttl_seconds=ttl_seconds)
