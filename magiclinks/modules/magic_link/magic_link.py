import logging
import uuid
from typing import Any, Optional

from ...config.provider import MAGIC_TTL
from ..storage.kv import BatchKVStore, KVStore
from .models import (
    TokenRecord,
    canonicalize_email,
    email_key,
    iso_timestamp,
    token_key,
)

logger = logging.getLogger(__name__)


def mask_token(token: str) -> str:
    """Shorten a token for log output."""
    return f"{token[:8]}..."


class MagicLinkModule:
    def __init__(self, store: KVStore, ttl_seconds: int = MAGIC_TTL):
        """
        Initialize magic link module.

        Args:
            store: Key-value store holding token and email index records
            ttl_seconds: Lifetime of both records (30 days)
        """
        self.store = store
        self.ttl_seconds = ttl_seconds

    async def generate_magic_token(self, email: str, tier: Any = None) -> str:
        """
        Issue a new magic link token for an email.

        Args:
            email: Email address (any case, surrounding whitespace ignored)
            tier: Opaque classification stored with the token

        Returns:
            Token (UUID)

        Raises:
            ValueError: If email is empty

        Logic:
        1. Canonicalize email
        2. Generate UUID for token
        3. Store token -> record mapping
        4. Store email -> token mapping (overwrites any previous token)
        5. Set TTL on both keys
        """
        canonical = canonicalize_email(email or "")
        if not canonical:
            raise ValueError("email is required to generate a magic token")

        token = str(uuid.uuid4())
        record = TokenRecord(email=canonical, tier=tier, created=iso_timestamp())

        items = [
            (token_key(token), record.to_json()),
            (email_key(canonical), token),
        ]
        if isinstance(self.store, BatchKVStore):
            await self.store.put_many(items, self.ttl_seconds)
        else:
            for key, value in items:
                await self.store.put(key, value, self.ttl_seconds)

        logger.info(f"Issued magic token {mask_token(token)} for {canonical}")
        return token

    async def validate_magic_token(self, token: Optional[str]) -> Optional[TokenRecord]:
        """
        Resolve a token to its record.

        Validation does not consume the token; it stays valid until
        revoked or expired.

        Args:
            token: Token from the magic link (may be empty or None)

        Returns:
            TokenRecord or None if unknown, revoked or expired

        Raises:
            MalformedRecordError: If the stored record cannot be decoded
        """
        if not token:
            return None

        key = token_key(token)
        raw = await self.store.get(key)
        if not raw:
            logger.debug(f"Magic token {mask_token(str(token))} not found")
            return None

        return TokenRecord.from_json(key, raw)

    async def get_token_by_email(self, email: Optional[str]) -> Optional[str]:
        """
        Look up the most recently issued token for an email.

        Args:
            email: Email address (may be empty or None)

        Returns:
            Token or None
        """
        if not email:
            return None

        canonical = canonicalize_email(email)
        if not canonical:
            return None

        return await self.store.get(email_key(canonical)) or None

    async def revoke_magic_token(self, token: Optional[str]) -> None:
        """
        Revoke a token and its email index entry.

        Unknown, expired or empty tokens are ignored.

        Args:
            token: Token to revoke
        """
        record = await self.validate_magic_token(token)
        if not record:
            return

        keys = [token_key(token), email_key(record.email)]
        if isinstance(self.store, BatchKVStore):
            await self.store.delete_many(keys)
        else:
            for key in keys:
                await self.store.delete(key)

        logger.info(f"Revoked magic token {mask_token(token)} for {record.email}")
