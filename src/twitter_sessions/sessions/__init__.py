"""Session lifecycle management for multi-agent Twitter automation."""

from twitter_sessions.sessions.components import (
    ConnectionClient,
    SessionComponents,
)
from twitter_sessions.sessions.registry import (
    SessionKey,
    SessionRegistry,
    get_registry,
    reset_registry,
)
from twitter_sessions.sessions.session import (
    SPACES_ENABLE_SETTING,
    TwitterSession,
    spaces_enabled,
)
from twitter_sessions.sessions.states import (
    ALLOWED_TRANSITIONS,
    SessionState,
    can_transition,
)

__all__ = [
    # Registry
    "SessionKey",
    "SessionRegistry",
    "get_registry",
    "reset_registry",
    # Session
    "TwitterSession",
    "SPACES_ENABLE_SETTING",
    "spaces_enabled",
    # Collaborators
    "ConnectionClient",
    "SessionComponents",
    # States
    "SessionState",
    "ALLOWED_TRANSITIONS",
    "can_transition",
]
