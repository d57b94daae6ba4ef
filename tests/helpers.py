"""Test doubles for the external session collaborators."""

import asyncio
from typing import Any

from twitter_sessions.models.runtime import Character, LocalRuntime
from twitter_sessions.sessions.components import SessionComponents


class FakeConnection:
    """Connection double that counts init() calls.

    Attributes:
        runtime: Runtime the connection was built for
        init_calls: Number of times init() was awaited
        fail_times: Number of leading init() calls that raise
        delay: Seconds init() sleeps before completing
    """

    instances: list["FakeConnection"] = []

    def __init__(
        self,
        runtime: Any,
        fail_times: int = 0,
        delay: float = 0.0,
        error: Exception | None = None,
    ):
        self.runtime = runtime
        self.init_calls = 0
        self.fail_times = fail_times
        self.delay = delay
        self.error = error or ConnectionError("login failed")
        FakeConnection.instances.append(self)

    async def init(self) -> None:
        self.init_calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.init_calls <= self.fail_times:
            raise self.error


class FakeController:
    """Stands in for the posting, interaction and Spaces controllers."""

    def __init__(self, client: Any, runtime: Any):
        self.client = client
        self.runtime = runtime


def make_components(**connection_kwargs: Any) -> SessionComponents:
    """Build SessionComponents whose connection is a FakeConnection."""
    return SessionComponents(
        connection=lambda runtime: FakeConnection(runtime, **connection_kwargs),
        post=FakeController,
        interaction=FakeController,
        space=FakeController,
    )


def make_runtime(
    agent_id: str = "agent-1",
    settings: dict[str, Any] | None = None,
    character_settings: dict[str, Any] | None = None,
    secrets: dict[str, Any] | None = None,
) -> LocalRuntime:
    """Build an isolated LocalRuntime that ignores the process environment."""
    return LocalRuntime(
        agent_id=agent_id,
        character=Character(
            name=f"char-{agent_id}",
            settings=dict(character_settings or {}),
            secrets=dict(secrets or {}),
        ),
        settings=dict(settings or {}),
        use_environment=False,
    )


FULL_CREDENTIALS = {
    "TWITTER_USERNAME": "agent_bot",
    "TWITTER_PASSWORD": "hunter2",
    "TWITTER_EMAIL": "bot@example.com",
}
