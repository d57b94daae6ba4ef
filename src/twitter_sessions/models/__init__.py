"""Data models for twitter-sessions."""

from twitter_sessions.models.runtime import (
    AgentRuntime,
    Character,
    CharacterLike,
    LocalRuntime,
)

__all__ = [
    "AgentRuntime",
    "Character",
    "CharacterLike",
    "LocalRuntime",
]
