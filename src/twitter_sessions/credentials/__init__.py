"""Credential resolution for Twitter sessions."""

from twitter_sessions.credentials.models import (
    REQUIRED_FIELDS,
    CredentialField,
    CredentialSet,
    is_sufficient,
)
from twitter_sessions.credentials.resolver import (
    DEFAULT_SOURCES,
    CredentialResolver,
    CredentialSource,
    character_secret,
    character_setting,
    runtime_setting,
)

__all__ = [
    "CredentialField",
    "CredentialSet",
    "REQUIRED_FIELDS",
    "is_sufficient",
    "CredentialResolver",
    "CredentialSource",
    "DEFAULT_SOURCES",
    "runtime_setting",
    "character_setting",
    "character_secret",
]
