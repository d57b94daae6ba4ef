"""Core infrastructure for twitter-sessions."""

from twitter_sessions.core.config import Config
from twitter_sessions.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    RetryExhaustedError,
    StateTransitionError,
    TwitterSessionsError,
)

__all__ = [
    "Config",
    "TwitterSessionsError",
    "AuthenticationError",
    "ConfigurationError",
    "RetryExhaustedError",
    "StateTransitionError",
]
