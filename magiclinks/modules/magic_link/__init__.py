"""
Magic Link Module - Black Box Interface

Purpose: Issue and validate passwordless "magic link" tokens
Interface: generate_magic_token(), validate_magic_token(),
           get_token_by_email(), revoke_magic_token()
Hidden: Key layout, record encoding, TTL bookkeeping

Works over any KVStore (Redis, in-memory, edge KV) passed in explicitly.
"""

from .factory import MagicLinkFactory
from .magic_link import MAGIC_TTL, MagicLinkModule
from .models import MagicLinkError, MalformedRecordError, TokenRecord

__all__ = [
    "MAGIC_TTL",
    "MagicLinkFactory",
    "MagicLinkModule",
    "MagicLinkError",
    "MalformedRecordError",
    "TokenRecord",
]
