"""Process-wide registry of Twitter sessions keyed by client and agent."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from twitter_sessions.core.config import Config
from twitter_sessions.core.exceptions import ConfigurationError
from twitter_sessions.models.runtime import AgentRuntime
from twitter_sessions.sessions.components import SessionComponents
from twitter_sessions.sessions.session import TwitterSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionKey:
    """Registry key for one session slot.

    A tuple of both ids, so two agents sharing a client id never collide.
    """

    client_id: str
    agent_id: str

    def __str__(self) -> str:
        return f"{self.client_id}:{self.agent_id}"


class SessionRegistry:
    """Creates, tracks and stops Twitter sessions across agents.

    At most one session exists per (client_id, agent_id). Bookkeeping is
    guarded by a short-held asyncio lock that is never held while a
    connection initializes or a session stops; a key is claimed before its
    initialization starts so concurrent callers wait for that claim instead
    of building a second session.

    Example:
        registry = SessionRegistry(components)

        session = await registry.create_client(runtime, client_id)
        assert registry.get_client(client_id, runtime.agent_id) is session

        await registry.stop_client(client_id, runtime.agent_id)
        await registry.stop_all_clients()
    """

    def __init__(
        self,
        components: SessionComponents | None = None,
        config: Config | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            components: Collaborator constructors used to build sessions.
                May be provided later through ``configure``.
            config: Optional configuration passed on to sessions

        Raises:
            ValueError: If the configuration is invalid
        """
        self.components = components
        self.config = config or Config.from_env()
        self.config.validate()
        self._sessions: dict[SessionKey, TwitterSession] = {}
        self._pending: dict[SessionKey, asyncio.Future] = {}
        self._lock = asyncio.Lock()

    def configure(self, components: SessionComponents) -> None:
        """Attach collaborator constructors to a registry created without them.

        Raises:
            ConfigurationError: If different components are already attached
        """
        if self.components is not None and self.components != components:
            raise ConfigurationError("Session registry already configured with different components")
        self.components = components

    def _make_key(self, client_id: str, agent_id: str) -> SessionKey:
        return SessionKey(client_id=str(client_id), agent_id=str(agent_id))

    def _build_session(self, runtime: AgentRuntime, client_id: str) -> TwitterSession:
        if self.components is None:
            raise ConfigurationError(
                "No session components registered; call configure() first",
                details={"client_id": client_id},
            )
        return TwitterSession(runtime, self.components, client_id=client_id, config=self.config)

    async def create_client(self, runtime: AgentRuntime, client_id: str) -> TwitterSession:
        """Get the session for (client_id, runtime.agent_id), creating it if needed.

        Only one caller per key constructs and initializes a session; any
        concurrent callers wait and receive that same session. If creation
        fails, the error goes to the caller that attempted it, nothing is
        stored, and waiting callers try again on their own.

        Args:
            runtime: Host runtime of the owning agent
            client_id: Client identifier within the agent

        Returns:
            The active session for the key

        Raises:
            Exception: Construction or connection initialization errors
        """
        key = self._make_key(client_id, runtime.agent_id)

        while True:
            async with self._lock:
                existing = self._sessions.get(key)
                if existing is not None:
                    logger.info(f"Twitter client already exists for {client_id}")
                    return existing

                pending = self._pending.get(key)
                if pending is None:
                    claim = asyncio.get_running_loop().create_future()
                    self._pending[key] = claim
                    break

            # Another caller holds the claim; None means its attempt failed
            session = await asyncio.shield(pending)
            if session is not None:
                logger.info(f"Twitter client already exists for {client_id}")
                return session

        try:
            session = self._build_session(runtime, client_id)
            await session.initialize()
        except BaseException as e:
            async with self._lock:
                self._pending.pop(key, None)
            claim.set_result(None)
            if isinstance(e, Exception):
                logger.error(f"Failed to create Twitter client for {client_id}: {e}")
            raise

        async with self._lock:
            self._pending.pop(key, None)
            self._sessions[key] = session
        claim.set_result(session)
        logger.info(f"Created Twitter client for {client_id}")
        return session

    def get_client(self, client_id: str, agent_id: str) -> TwitterSession | None:
        """Look up a session without side effects.

        Returns:
            The session, or None if none is registered for the key
        """
        return self._sessions.get(self._make_key(client_id, agent_id))

    def list_clients(self, agent_id: str | None = None) -> list[TwitterSession]:
        """List registered sessions, optionally for a single agent."""
        return [
            session
            for key, session in self._sessions.items()
            if agent_id is None or key.agent_id == str(agent_id)
        ]

    async def _stop_entry(self, key: SessionKey, session: TwitterSession) -> bool:
        """Stop one session and drop it from the registry if the stop succeeded."""
        try:
            await session.stop()
        except Exception as e:
            logger.error(f"Error stopping Twitter client {key}: {e}")
            return False

        async with self._lock:
            if self._sessions.get(key) is session:
                del self._sessions[key]
        return True

    async def stop_client(self, client_id: str, agent_id: str) -> None:
        """Stop and remove one session; a missing key is a no-op.

        A session whose stop fails stays registered so the stop can be
        retried later. Errors are logged, never raised.
        """
        key = self._make_key(client_id, agent_id)
        async with self._lock:
            session = self._sessions.get(key)
        if session is None:
            return

        if await self._stop_entry(key, session):
            logger.info(f"Stopped Twitter client for {client_id}")

    async def stop_all_clients(self) -> None:
        """Stop every registered session independently.

        Creations already in flight are awaited first so a session that
        finishes initializing during shutdown is stopped too. One session
        failing to stop does not prevent attempts on the rest.
        """
        async with self._lock:
            pending = list(self._pending.values())
        if pending:
            # Claims resolve to None on failure and never raise
            await asyncio.gather(*(asyncio.shield(claim) for claim in pending))

        async with self._lock:
            entries = list(self._sessions.items())

        stopped = 0
        for key, session in entries:
            if await self._stop_entry(key, session):
                stopped += 1

        if entries:
            logger.info(f"Stopped {stopped} of {len(entries)} Twitter clients")

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, key: object) -> bool:
        return key in self._sessions


_registry: SessionRegistry | None = None


def get_registry(components: SessionComponents | None = None) -> SessionRegistry:
    """Get the process-wide registry, creating it on first access.

    Args:
        components: Collaborator constructors to attach if the registry has
            none yet

    Returns:
        The shared SessionRegistry

    Raises:
        ConfigurationError: If different components were attached earlier
        ValueError: If the environment configuration is invalid
    """
    global _registry
    if _registry is None:
        _registry = SessionRegistry()
        logger.debug("Created process-wide session registry")
    if components is not None:
        _registry.configure(components)
    return _registry


def reset_registry() -> None:
    """Forget the process-wide registry. Intended for tests."""
    global _registry
    _registry = None
