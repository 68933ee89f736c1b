"""Key-value store interfaces and the Redis adapter."""

import logging
from typing import Iterable, List, Optional, Protocol, Tuple, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class KVStore(Protocol):
    """Protocol for a key-value store with per-key expiration."""

    async def get(self, key: str) -> Optional[str]:
        """
        Read a value.

        Returns:
            Stored string, or None if absent or expired
        """
        ...

    async def put(self, key: str, value: str, ttl_seconds: int) -> None:
        """Write a value that expires after ttl_seconds."""
        ...

    async def delete(self, key: str) -> None:
        """Delete a key. Deleting an absent key is not an error."""
        ...


@runtime_checkable
class BatchKVStore(KVStore, Protocol):
    """Store that can apply several writes or deletes as one unit."""

    async def put_many(self, items: Iterable[Tuple[str, str]], ttl_seconds: int) -> None:
        ...

    async def delete_many(self, keys: Iterable[str]) -> None:
        ...


class RedisKVStore:
    """
    KVStore backed by an async Redis client.

    Single-key calls map to SETEX/GET/DEL. Batched calls run inside a
    MULTI/EXEC pipeline so both keys land (or fail) together.
    """

    def __init__(self, redis_client):
        """
        Initialize the adapter.

        Args:
            redis_client: Async Redis client (redis.asyncio.Redis)
        """
        self.redis = redis_client

    async def get(self, key: str) -> Optional[str]:
        value = await self.redis.get(key)
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    async def put(self, key: str, value: str, ttl_seconds: int) -> None:
        await self.redis.setex(key, ttl_seconds, value)

    async def delete(self, key: str) -> None:
        await self.redis.delete(key)

    async def put_many(self, items: Iterable[Tuple[str, str]], ttl_seconds: int) -> None:
        pipe = self.redis.pipeline(transaction=True)
        for key, value in items:
            pipe.setex(key, ttl_seconds, value)
        results: List = await pipe.execute()
        logger.debug(f"Wrote {len(results)} keys in one transaction")

    async def delete_many(self, keys: Iterable[str]) -> None:
        keys = list(keys)
        if keys:
            await self.redis.delete(*keys)
