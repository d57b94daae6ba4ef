"""Plugin boundary between the host runtime and the session registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from twitter_sessions.core.config import Config
from twitter_sessions.credentials.resolver import CredentialResolver
from twitter_sessions.models.runtime import AgentRuntime
from twitter_sessions.sessions.components import SessionComponents
from twitter_sessions.sessions.registry import SessionRegistry, get_registry
from twitter_sessions.utils.identifiers import string_to_uuid

logger = logging.getLogger(__name__)

TWITTER_CLIENT_NAME = "twitter"
PLUGIN_DESCRIPTION = "Twitter client with per-server instance management"


@dataclass
class StopHandle:
    """Handle returned to the host; stopping it stops every session.

    It holds a reference to the registry only and owns no sessions.
    """

    registry: SessionRegistry

    async def stop(self) -> None:
        await self.registry.stop_all_clients()


class TwitterClientInterface:
    """Client adapter the host runtime starts once per agent.

    ``start`` creates the default session when the agent's credentials are
    complete and always hands back a StopHandle, so a failing login never
    aborts the host's plugin loading.
    """

    name: str = TWITTER_CLIENT_NAME

    def __init__(
        self,
        registry: SessionRegistry | Callable[[], SessionRegistry] = get_registry,
        resolver: CredentialResolver | None = None,
        config: Config | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            registry: Registry to use, or a zero-argument provider for one.
                Defaults to the process-wide registry.
            resolver: Credential resolver. Defaults to standard precedence.
            config: Optional configuration (default client name)

        Raises:
            ValueError: If the configuration is invalid
        """
        self._registry = registry
        self.resolver = resolver or CredentialResolver()
        self.config = config or Config.from_env()
        self.config.validate()

    @property
    def registry(self) -> SessionRegistry:
        if isinstance(self._registry, SessionRegistry):
            return self._registry
        return self._registry()

    @property
    def default_client_id(self) -> str:
        return string_to_uuid(self.config.default_client_name)

    async def start(self, runtime: AgentRuntime) -> StopHandle:
        """Start the Twitter client for an agent.

        Args:
            runtime: Host runtime of the agent

        Returns:
            StopHandle whose ``stop()`` stops all sessions in the registry
        """
        registry = self.registry
        credentials = self.resolver.resolve(runtime)

        if credentials.is_sufficient:
            logger.info("Creating default Twitter client from character settings")
            try:
                await registry.create_client(runtime, self.default_client_id)
            except Exception as e:
                logger.error(f"Failed to create default Twitter client: {e}")
        else:
            missing = ", ".join(f.value for f in credentials.missing)
            logger.info(
                f"Skipping default Twitter client for agent {runtime.agent_id}: "
                f"missing {missing}"
            )

        return StopHandle(registry)

    async def stop(self) -> None:
        """Stop every session in the registry."""
        await self.registry.stop_all_clients()


@dataclass
class Plugin:
    """Descriptor the host runtime loads.

    Attributes:
        name: Plugin name
        description: Human-readable description
        clients: Client adapters the host starts per agent
        actions: Actions the host registers for agents
    """

    name: str
    description: str
    clients: list[TwitterClientInterface] = field(default_factory=list)
    actions: list[Any] = field(default_factory=list)


def create_plugin(
    components: SessionComponents | None = None,
    registry: SessionRegistry | None = None,
    actions: list[Any] | None = None,
    config: Config | None = None,
) -> Plugin:
    """Build the Twitter plugin descriptor.

    Args:
        components: Collaborator constructors for new sessions
        registry: Registry to bind to. Defaults to the process-wide one.
        actions: Actions to expose to the host
        config: Optional configuration

    Returns:
        Plugin with a single Twitter client adapter
    """
    if registry is None:
        registry = get_registry(components)
    elif components is not None:
        registry.configure(components)

    return Plugin(
        name=TWITTER_CLIENT_NAME,
        description=PLUGIN_DESCRIPTION,
        clients=[TwitterClientInterface(registry=registry, config=config)],
        actions=list(actions or []),
    )
