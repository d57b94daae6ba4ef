"""twitter-sessions - Per-agent Twitter session lifecycle management.

This package provides both a library interface and CLI for:
- Resolving Twitter credentials from runtime settings, character settings and secrets
- Keeping at most one live session per (client, agent) across concurrent callers
- Exposing the registry to a host runtime as a start/stop plugin

Library Usage:
    >>> from twitter_sessions import SessionComponents, create_plugin
    >>>
    >>> components = SessionComponents(
    ...     connection=ClientBase,
    ...     post=TwitterPostClient,
    ...     interaction=TwitterInteractionClient,
    ...     space=TwitterSpaceClient,
    ... )
    >>> plugin = create_plugin(components)
    >>> handle = await plugin.clients[0].start(runtime)
    >>> await handle.stop()

CLI Usage:
    $ twitter-sessions check character.json
"""

__version__ = "0.1.0"

# Core
from twitter_sessions.core.config import Config
from twitter_sessions.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    RetryExhaustedError,
    StateTransitionError,
    TwitterSessionsError,
)

# Models
from twitter_sessions.models.runtime import AgentRuntime, Character, LocalRuntime

# Credentials
from twitter_sessions.credentials import (
    CredentialField,
    CredentialResolver,
    CredentialSet,
    is_sufficient,
)

# Sessions
from twitter_sessions.sessions import (
    SessionComponents,
    SessionKey,
    SessionRegistry,
    SessionState,
    TwitterSession,
    get_registry,
)

# Plugin
from twitter_sessions.plugin import (
    Plugin,
    StopHandle,
    TwitterClientInterface,
    create_plugin,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Config",
    "TwitterSessionsError",
    "AuthenticationError",
    "ConfigurationError",
    "RetryExhaustedError",
    "StateTransitionError",
    # Models
    "AgentRuntime",
    "Character",
    "LocalRuntime",
    # Credentials
    "CredentialField",
    "CredentialResolver",
    "CredentialSet",
    "is_sufficient",
    # Sessions
    "SessionComponents",
    "SessionKey",
    "SessionRegistry",
    "SessionState",
    "TwitterSession",
    "get_registry",
    # Plugin
    "Plugin",
    "StopHandle",
    "TwitterClientInterface",
    "create_plugin",
]
