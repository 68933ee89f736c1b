"""
Custom logging configuration that keeps magic link tokens out of log output
"""

import logging
import logging.config
import re
from typing import Any, Dict

TOKEN_PATTERN = re.compile(
    r"\b([0-9a-fA-F]{8})-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\b"
)


class TokenRedactionFilter(logging.Filter):
    """Filter that masks UUID-shaped tokens in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the message with tokens shortened to their first 8 characters."""
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Leave broken format args for Handler.handleError to report
            return True
        redacted = TOKEN_PATTERN.sub(r"\1...", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True  # Never drop records, only rewrite them


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with token redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "token_redaction_filter": {
                "()": TokenRedactionFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
                "filters": ["token_redaction_filter"]
            }
        },
        "loggers": {
            "magiclinks": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }
