"""Contracts for the collaborators a session is assembled from.

The connection, posting, interaction and Spaces controllers live outside
this package. A host wires them in through ``SessionComponents``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol

from twitter_sessions.models.runtime import AgentRuntime


class ConnectionClient(Protocol):
    """Authenticated connection and timeline cache."""

    async def init(self) -> None:
        """Log in and bring the connection up.

        Raises on bad credentials or network failure.
        """
        ...


ConnectionFactory = Callable[[AgentRuntime], ConnectionClient]
ControllerFactory = Callable[[ConnectionClient, AgentRuntime], Any]


@dataclass(frozen=True)
class SessionComponents:
    """Constructors for the pieces of a TwitterSession.

    Attributes:
        connection: Builds the connection handle from the runtime
        post: Builds the autonomous posting controller
        interaction: Builds the mention/interaction controller
        space: Builds the optional Spaces (live-audio) controller
    """

    connection: ConnectionFactory
    post: ControllerFactory
    interaction: ControllerFactory
    space: ControllerFactory | None = None
