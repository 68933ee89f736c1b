"""
Magic link data models.

These models define the structure of the records the magic link module
writes to and reads from the key-value store.
"""

from datetime import UTC, datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

# Key namespaces shared with already stored data
TOKEN_KEY_PREFIX = "magic:"
EMAIL_KEY_PREFIX = "email:"


class MagicLinkError(Exception):
    """Base error for the magic link module."""


class MalformedRecordError(MagicLinkError):
    """A stored token record could not be decoded."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Malformed token record at {key}: {reason}")


class TokenRecord(BaseModel):
    """Identity bound to a magic link token."""

    email: str = Field(..., description="Canonical (trimmed, lower-case) email")
    tier: Optional[Any] = Field(None, description="Opaque caller-supplied classification")
    created: str = Field(..., description="ISO-8601 creation timestamp, informational only")

    def to_json(self) -> str:
        """Encode for storage."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, key: str, raw: str) -> "TokenRecord":
        """
        Decode a stored value.

        Args:
            key: Store key the value was read from (for error reporting)
            raw: Stored JSON text

        Returns:
            Decoded TokenRecord

        Raises:
            MalformedRecordError: If the value is not a valid token record
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise MalformedRecordError(key, f"{exc.error_count()} validation error(s)") from exc


def canonicalize_email(email: str) -> str:
    """Normalize an email for storage and lookup."""
    return email.strip().lower()


def token_key(token: str) -> str:
    return f"{TOKEN_KEY_PREFIX}{token}"


def email_key(canonical_email: str) -> str:
    return f"{EMAIL_KEY_PREFIX}{canonical_email}"


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a UTC timestamp the way existing records store it.

    Millisecond precision with a "Z" suffix, e.g. 2024-01-01T00:00:00.000Z.
    """
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
