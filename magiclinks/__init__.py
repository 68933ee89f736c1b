"""
magiclinks - Passwordless magic link tokens over a key-value store

Architecture:
- Each module is self-contained with clear interfaces
- The store is always passed in explicitly, never looked up globally
- Modules are completely replaceable

Modules:
- magic_link: Token issue, validation, lookup and revocation
- storage: Key-value store protocols and the Redis adapter
"""

from .modules.magic_link import (
    MAGIC_TTL,
    MagicLinkError,
    MagicLinkFactory,
    MagicLinkModule,
    MalformedRecordError,
    TokenRecord,
)

__version__ = "1.0.0"

__all__ = [
    "MAGIC_TTL",
    "MagicLinkError",
    "MagicLinkFactory",
    "MagicLinkModule",
    "MalformedRecordError",
    "TokenRecord",
]
