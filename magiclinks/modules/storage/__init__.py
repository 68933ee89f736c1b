"""
Storage Module - Black Box Interface

Purpose: Own the connection to the key-value store
Interface: connect(), disconnect(), async with; KVStore get()/put()/delete()
Hidden: Redis specifics, connection pooling, transactions

Can be replaced with any storage backend without affecting other modules.
"""

import logging

import redis.asyncio as redis

from ...config.provider import StoreConfig
from .kv import BatchKVStore, KVStore, RedisKVStore

logger = logging.getLogger(__name__)


class StorageModule:
    """Lazily connected Redis client for the configured store."""

    def __init__(self, store_config: StoreConfig):
        """
        Initialize storage.

        Args:
            store_config: Store settings from the config provider
        """
        self.config = store_config
        self._client = None

    async def connect(self) -> redis.Redis:
        """Return the client, creating it on first use."""
        if self._client is None:
            self._client = redis.from_url(self.config.redis_url, decode_responses=True)
            logger.debug("Created Redis client")
        return self._client

    async def disconnect(self) -> None:
        """Close the client if one was created."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> redis.Redis:
        return await self.connect()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()


__all__ = ["StorageModule", "KVStore", "BatchKVStore", "RedisKVStore"]
