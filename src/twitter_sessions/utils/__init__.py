"""Utility modules for twitter-sessions."""

from twitter_sessions.utils.backoff import exponential_backoff, retry_async
from twitter_sessions.utils.identifiers import string_to_uuid
from twitter_sessions.utils.logging_setup import configure_logging
from twitter_sessions.utils.sanitization import mask_value, redact_sensitive_data

__all__ = [
    "exponential_backoff",
    "retry_async",
    "string_to_uuid",
    "configure_logging",
    "mask_value",
    "redact_sensitive_data",
]
