"""
Unit tests for magic link data models.
"""

import json
from datetime import UTC, datetime, timedelta, timezone

import pytest

from magiclinks.modules.magic_link.models import (
    MagicLinkError,
    MalformedRecordError,
    TokenRecord,
    canonicalize_email,
    email_key,
    iso_timestamp,
    token_key,
)


class TestCanonicalizeEmail:
    """Test email canonicalization."""

    @pytest.mark.parametrize(
        "raw",
        ["user@example.com", "User@Example.com", "  USER@EXAMPLE.COM\n", "\tuser@example.com "],
    )
    def test_variants_collapse(self, raw):
        assert canonicalize_email(raw) == "user@example.com"

    def test_idempotent(self):
        once = canonicalize_email(" Mixed@Case.Org ")
        assert canonicalize_email(once) == once


class TestKeys:
    def test_token_key(self):
        assert token_key("abc") == "magic:abc"

    def test_email_key(self):
        assert email_key("a@b.com") == "email:a@b.com"


class TestIsoTimestamp:
    def test_matches_javascript_format(self):
        moment = datetime(2024, 3, 5, 7, 8, 9, 123456, tzinfo=UTC)
        assert iso_timestamp(moment) == "2024-03-05T07:08:09.123Z"

    def test_converts_to_utc(self):
        moment = datetime(2024, 3, 5, 9, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert iso_timestamp(moment) == "2024-03-05T07:00:00.000Z"

    def test_defaults_to_now(self):
        assert iso_timestamp().endswith("Z")


class TestTokenRecord:
    """Test record encoding and decoding."""

    def test_encodes_exact_fields(self):
        record = TokenRecord(email="a@b.com", tier="pro", created="2024-01-01T00:00:00.000Z")

        assert json.loads(record.to_json()) == {
            "email": "a@b.com",
            "tier": "pro",
            "created": "2024-01-01T00:00:00.000Z",
        }

    def test_decodes_stored_value(self):
        raw = '{"email":"a@b.com","tier":"pro","created":"2024-01-01T00:00:00.000Z"}'

        record = TokenRecord.from_json("magic:t", raw)

        assert record.email == "a@b.com"
        assert record.tier == "pro"

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "not json",
            "null",
            '"just a string"',
            '{"tier": "pro", "created": "2024-01-01T00:00:00.000Z"}',
            '{"email": 42, "created": "2024-01-01T00:00:00.000Z"}',
        ],
    )
    def test_malformed(self, raw):
        with pytest.raises(MalformedRecordError) as exc_info:
            TokenRecord.from_json("magic:t", raw)

        assert exc_info.value.key == "magic:t"
        assert "magic:t" in str(exc_info.value)

    def test_malformed_is_magic_link_error(self):
        assert issubclass(MalformedRecordError, MagicLinkError)
