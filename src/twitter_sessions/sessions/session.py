"""A single Twitter automation identity and its sub-controllers."""

from __future__ import annotations

import logging
from typing import Any

from twitter_sessions.core.config import Config
from twitter_sessions.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    StateTransitionError,
)
from twitter_sessions.models.runtime import AgentRuntime
from twitter_sessions.sessions.components import ConnectionClient, SessionComponents
from twitter_sessions.sessions.states import SessionState, can_transition
from twitter_sessions.utils.backoff import retry_async

logger = logging.getLogger(__name__)

# Host setting that enables the Spaces controller; only the boolean True counts
SPACES_ENABLE_SETTING = "TWITTER_SPACES_ENABLE"


def spaces_enabled(runtime: AgentRuntime) -> bool:
    """Check whether the Spaces controller should be built for a runtime."""
    return runtime.get_setting(SPACES_ENABLE_SETTING) is True


class TwitterSession:
    """Bundle of controllers acting as one authenticated Twitter identity.

    Orchestrates:
    - client: base operations (login, timeline caching)
    - post: autonomous posting
    - interaction: mentions and replies
    - space: Spaces (live audio), only when enabled at construction

    Construction builds the controllers but does not log in; the registry
    calls ``initialize()`` separately so it can guarantee a single init per
    key.
    """

    name: str = "twitter"

    def __init__(
        self,
        runtime: AgentRuntime,
        components: SessionComponents,
        client_id: str = "",
        config: Config | None = None,
    ) -> None:
        """Build the session's controllers.

        Args:
            runtime: Host runtime of the owning agent
            components: Collaborator constructors
            client_id: Registry client id this session is stored under
            config: Optional configuration (init retry settings)

        Raises:
            ConfigurationError: If Spaces are enabled but no Spaces
                constructor was provided
        """
        self.runtime = runtime
        self.agent_id = runtime.agent_id
        self.client_id = client_id
        self.config = config or Config.from_env()
        self._state = SessionState.CONSTRUCTED

        self.client: ConnectionClient = components.connection(runtime)
        self.post: Any = components.post(self.client, runtime)
        self.interaction: Any = components.interaction(self.client, runtime)

        self.space: Any | None = None
        if spaces_enabled(runtime):
            if components.space is None:
                raise ConfigurationError(
                    "Spaces are enabled but no Spaces controller was provided",
                    details={"agent_id": self.agent_id},
                )
            self.space = components.space(self.client, runtime)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == SessionState.ACTIVE

    @property
    def has_space(self) -> bool:
        return self.space is not None

    def _transition(self, target: SessionState) -> None:
        if not can_transition(self._state, target):
            raise StateTransitionError(
                f"Cannot move session from {self._state.value} to {target.value}",
                current_state=self._state.value,
                attempted_state=target.value,
            )
        self._state = target

    async def initialize(self) -> None:
        """Bring up the connection and mark the session active.

        Connection failures are retried according to the configured init
        retry settings; authentication rejections are never retried.

        Raises:
            StateTransitionError: If the session was already initialized
            Exception: Whatever the connection's ``init()`` raises once
                retries are used up
        """
        self._transition(SessionState.INITIALIZING)

        async def attempt() -> None:
            await self.client.init()

        await retry_async(
            attempt,
            max_retries=self.config.init_max_retries,
            base_delay=self.config.init_retry_base_delay,
            max_delay=self.config.init_retry_max_delay,
            jitter=self.config.init_retry_jitter,
            non_retryable_exceptions=(AuthenticationError,),
        )
        self._transition(SessionState.ACTIVE)

    async def stop(self) -> None:
        """Stop the session.

        Graceful in-place shutdown of the underlying connection is not
        supported yet: this only records the state change and logs the
        limitation. It never raises.
        """
        if self._state.is_stopping_or_stopped:
            return
        if self._state != SessionState.ACTIVE:
            logger.debug(f"Stop ignored for {self} in state {self._state.value}")
            return

        self._transition(SessionState.STOPPING)
        logger.warning("Twitter client does not support stopping yet")
        self._transition(SessionState.STOPPED)

    def __repr__(self) -> str:
        return (
            f"TwitterSession({self.client_id}:{self.agent_id}, "
            f"state={self._state.value}, space={self.has_space})"
        )
