"""Custom exceptions for twitter-sessions."""

from typing import Any


class TwitterSessionsError(Exception):
    """Base exception for all twitter-sessions errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(TwitterSessionsError):
    """Raised when the registry or plugin is set up inconsistently."""


class AuthenticationError(TwitterSessionsError):
    """Raised by connection collaborators when login is rejected."""

    def __init__(
        self,
        message: str = "Authentication failed",
        username: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.username = username


class StateTransitionError(TwitterSessionsError):
    """Raised when an invalid session state transition is attempted."""

    def __init__(
        self,
        message: str,
        current_state: str,
        attempted_state: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.current_state = current_state
        self.attempted_state = attempted_state


class RetryExhaustedError(TwitterSessionsError):
    """Raised when all retry attempts have been exhausted."""

    def __init__(
        self,
        message: str = "All retry attempts exhausted",
        attempts: int = 0,
        last_error: Exception | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.attempts = attempts
        self.last_error = last_error
