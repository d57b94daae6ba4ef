"""Pytest configuration and fixtures for twitter-sessions tests."""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from twitter_sessions.core.config import Config
from twitter_sessions.models.runtime import LocalRuntime
from twitter_sessions.sessions.components import SessionComponents
from twitter_sessions.sessions.registry import SessionRegistry, reset_registry

from helpers import FULL_CREDENTIALS, FakeConnection, make_components, make_runtime


@pytest.fixture(autouse=True)
def reset_state():
    """Clear the FakeConnection log and the process-wide registry."""
    FakeConnection.instances = []
    reset_registry()
    yield
    FakeConnection.instances = []
    reset_registry()


@pytest.fixture
def config() -> Config:
    """Config with retries disabled and no jitter."""
    return Config(
        default_client_name="default",
        init_max_retries=0,
        init_retry_base_delay=0.0,
        init_retry_max_delay=0.0,
        init_retry_jitter=0.0,
        log_level="INFO",
        redact_sensitive=True,
    )


@pytest.fixture
def components() -> SessionComponents:
    """Components with a connection that always succeeds."""
    return make_components()


@pytest.fixture
def registry(components, config) -> SessionRegistry:
    """Isolated registry per test."""
    return SessionRegistry(components, config=config)


@pytest.fixture
def runtime() -> LocalRuntime:
    """Runtime with complete credentials in runtime settings."""
    return make_runtime(settings=FULL_CREDENTIALS)
