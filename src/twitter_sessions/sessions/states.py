"""State definitions for the Twitter session lifecycle."""

from enum import Enum


class SessionState(str, Enum):
    """Lifecycle states of a TwitterSession.

    A session progresses strictly forward:
    1. CONSTRUCTED - Sub-controllers built, connection not yet initialized
    2. INITIALIZING - Connection login/bring-up in progress
    3. ACTIVE - Initialized and registered
    4. STOPPING - Stop requested
    5. STOPPED - Terminal; a stopped session is never reused
    """

    CONSTRUCTED = "constructed"
    INITIALIZING = "initializing"
    ACTIVE = "active"
    STOPPING = "stopping"
    STOPPED = "stopped"

    @property
    def is_stopping_or_stopped(self) -> bool:
        """Check if a stop has already been requested."""
        return self in (SessionState.STOPPING, SessionState.STOPPED)


ALLOWED_TRANSITIONS: dict[SessionState, frozenset[SessionState]] = {
    SessionState.CONSTRUCTED: frozenset({SessionState.INITIALIZING}),
    SessionState.INITIALIZING: frozenset({SessionState.ACTIVE}),
    SessionState.ACTIVE: frozenset({SessionState.STOPPING}),
    SessionState.STOPPING: frozenset({SessionState.STOPPED}),
    SessionState.STOPPED: frozenset(),
}


def can_transition(current: SessionState, target: SessionState) -> bool:
    """Check whether ``current -> target`` is a legal transition."""
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())
