"""Credential resolution across runtime settings, character settings and secrets."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence

from twitter_sessions.credentials.models import CredentialField, CredentialSet
from twitter_sessions.models.runtime import AgentRuntime

logger = logging.getLogger(__name__)

CredentialSource = Callable[[AgentRuntime, str], Any]


def runtime_setting(runtime: AgentRuntime, key: str) -> Any:
    """Explicit runtime setting."""
    return runtime.get_setting(key)


def character_setting(runtime: AgentRuntime, key: str) -> Any:
    """Character-level ``settings`` entry."""
    return _lookup(getattr(runtime.character, "settings", None), key)


def character_secret(runtime: AgentRuntime, key: str) -> Any:
    """Character-level ``secrets`` entry."""
    return _lookup(getattr(runtime.character, "secrets", None), key)


def _lookup(mapping: Mapping[str, Any] | None, key: str) -> Any:
    if not mapping:
        return None
    return mapping.get(key)


# Highest precedence first
DEFAULT_SOURCES: tuple[CredentialSource, ...] = (
    runtime_setting,
    character_setting,
    character_secret,
)


def _is_defined(value: Any) -> bool:
    return value is not None and value != ""


class CredentialResolver:
    """Derives a tenant's CredentialSet from ordered configuration sources.

    Each field is resolved independently: sources are consulted in order
    and the first one yielding a defined (non-None, non-empty) value wins.
    Fields no source defines are left out of the result.

    Example:
        >>> resolver = CredentialResolver()
        >>> creds = resolver.resolve(runtime)
        >>> if creds.is_sufficient:
        ...     ...
    """

    def __init__(self, sources: Sequence[CredentialSource] | None = None) -> None:
        """Initialize the resolver.

        Args:
            sources: Lookup functions, highest precedence first. Defaults to
                runtime setting, then character settings, then character
                secrets.
        """
        self.sources: tuple[CredentialSource, ...] = tuple(
            DEFAULT_SOURCES if sources is None else sources
        )

    def resolve_field(self, runtime: AgentRuntime, field: CredentialField) -> Any:
        """Resolve a single field, returning None if no source defines it."""
        for source in self.sources:
            value = source(runtime, field.value)
            if _is_defined(value):
                return value
        return None

    def resolve(self, runtime: AgentRuntime) -> CredentialSet:
        """Resolve every credential field for a runtime.

        Args:
            runtime: Host runtime for the tenant

        Returns:
            CredentialSet containing only the fields that were found
        """
        credentials = CredentialSet(
            {field: self.resolve_field(runtime, field) for field in CredentialField}
        )
        logger.debug(
            f"Resolved credentials for agent {runtime.agent_id}: {credentials.to_dict()}"
        )
        return credentials
