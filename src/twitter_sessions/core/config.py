"""Configuration management for twitter-sessions."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Config:
    """Global configuration for twitter-sessions.

    All values can be overridden via environment variables with the
    TWITTER_SESSIONS_ prefix.
    Example: TWITTER_SESSIONS_INIT_MAX_RETRIES=2
    """

    # Name the default client id is derived from
    default_client_name: str = field(
        default_factory=lambda: os.environ.get("TWITTER_SESSIONS_DEFAULT_CLIENT", "default")
    )

    # Connection init retry settings
    init_max_retries: int = field(
        default_factory=lambda: int(os.environ.get("TWITTER_SESSIONS_INIT_MAX_RETRIES", "0"))
    )
    init_retry_base_delay: float = field(
        default_factory=lambda: float(os.environ.get("TWITTER_SESSIONS_INIT_RETRY_BASE_DELAY", "1.0"))
    )
    init_retry_max_delay: float = field(
        default_factory=lambda: float(os.environ.get("TWITTER_SESSIONS_INIT_RETRY_MAX_DELAY", "30.0"))
    )
    init_retry_jitter: float = field(
        default_factory=lambda: float(os.environ.get("TWITTER_SESSIONS_INIT_RETRY_JITTER", "0.1"))
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.environ.get("TWITTER_SESSIONS_LOG_LEVEL", "INFO")
    )
    redact_sensitive: bool = field(
        default_factory=lambda: os.environ.get("TWITTER_SESSIONS_REDACT_SENSITIVE", "true").lower() == "true"
    )

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a retry setting is out of range.
        """
        if self.init_max_retries < 0:
            raise ValueError("init_max_retries must be >= 0")
        if self.init_retry_base_delay < 0 or self.init_retry_max_delay < 0:
            raise ValueError("Retry delays must be >= 0")
        if not 0.0 <= self.init_retry_jitter <= 1.0:
            raise ValueError("init_retry_jitter must be between 0.0 and 1.0")
        if not self.default_client_name:
            raise ValueError("default_client_name must not be empty")

    @classmethod
    def from_env(cls) -> "Config":
        """Create a Config instance from environment variables.

        Returns:
            Config instance with values from environment.
        """
        return cls()
