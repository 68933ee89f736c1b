"""
Shared pytest fixtures for magiclinks tests.

This module provides common fixtures including:
- InMemoryKVStore: KVStore fake with TTL bookkeeping and a controllable clock
- Redis mocks for storage adapter tests
"""

import os
import sys
from typing import Dict, List, Optional, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from magiclinks.modules.magic_link import MagicLinkFactory


# =============================================================================
# In-memory store
# =============================================================================


class InMemoryKVStore:
    """
    KVStore fake that expires keys against a manually advanced clock.

    Usage:
        async def test_expiry(memory_store, magic_links):
            token = await magic_links.generate_magic_token("a@b.com", "pro")
            memory_store.advance(magic_links.ttl_seconds)
            assert await magic_links.validate_magic_token(token) is None
    """

    def __init__(self):
        self.now = 0
        self._data: Dict[str, Tuple[str, int]] = {}
        self.calls: List[Tuple[str, str]] = []

    def advance(self, seconds: int) -> None:
        """Move the clock forward."""
        self.now += seconds

    def ttl(self, key: str) -> Optional[int]:
        """Remaining lifetime of a live key, else None."""
        entry = self._data.get(key)
        if entry is None or entry[1] <= self.now:
            return None
        return entry[1] - self.now

    def raw_put(self, key: str, value: str, ttl_seconds: int = 60) -> None:
        """Write directly, bypassing call recording."""
        self._data[key] = (value, self.now + ttl_seconds)

    async def get(self, key: str) -> Optional[str]:
        self.calls.append(("get", key))
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at <= self.now:
            del self._data[key]
            return None
        return value

    async def put(self, key: str, value: str, ttl_seconds: int) -> None:
        self.calls.append(("put", key))
        self._data[key] = (value, self.now + ttl_seconds)

    async def delete(self, key: str) -> None:
        self.calls.append(("delete", key))
        self._data.pop(key, None)


@pytest.fixture
def memory_store():
    """Empty in-memory store."""
    return InMemoryKVStore()


@pytest.fixture
def magic_links(memory_store):
    """MagicLinkModule wired to the in-memory store."""
    return MagicLinkFactory.build_for_testing(memory_store)


# =============================================================================
# Redis mocks
# =============================================================================


@pytest.fixture
def redis_pipeline():
    """Mock MULTI/EXEC pipeline; commands buffer synchronously."""
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[True, True])
    return pipe


@pytest.fixture
def mock_redis(redis_pipeline):
    """Create a mock async Redis client."""
    redis = AsyncMock()
    redis.setex = AsyncMock()
    redis.get = AsyncMock(return_value=None)
    redis.delete = AsyncMock()
    redis.pipeline = MagicMock(return_value=redis_pipeline)
    return redis
