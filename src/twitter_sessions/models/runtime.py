"""Host runtime contracts and a local, file-backed implementation."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Protocol

from twitter_sessions.utils.identifiers import string_to_uuid

logger = logging.getLogger(__name__)


class CharacterLike(Protocol):
    """Character configuration as exposed by the host runtime."""

    settings: Mapping[str, Any] | None
    secrets: Mapping[str, Any] | None


class AgentRuntime(Protocol):
    """The slice of the host runtime this package consumes."""

    agent_id: str
    character: CharacterLike

    def get_setting(self, key: str) -> Any: ...

    def set_setting(self, key: str, value: Any, secret: bool = False) -> None: ...


@dataclass
class Character:
    """Character configuration with nested settings and secrets.

    Attributes:
        name: Character display name
        settings: Character-level settings
        secrets: Character-level secrets
    """

    name: str
    settings: dict[str, Any] = field(default_factory=dict)
    secrets: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Character:
        """Build a Character from a parsed character file."""
        return cls(
            name=data.get("name", ""),
            settings=dict(data.get("settings") or {}),
            secrets=dict(data.get("secrets") or {}),
        )


@dataclass
class LocalRuntime:
    """Minimal AgentRuntime for the CLI and tests.

    ``get_setting`` reads explicit runtime settings first and falls back to
    the process environment, mirroring how host runtimes expose settings.

    Attributes:
        agent_id: Stable tenant identifier
        character: Character configuration
        settings: Explicit runtime settings
        use_environment: Whether get_setting falls back to os.environ
    """

    agent_id: str
    character: Character
    settings: dict[str, Any] = field(default_factory=dict)
    use_environment: bool = True

    def get_setting(self, key: str) -> Any:
        if key in self.settings:
            return self.settings[key]
        if self.use_environment:
            return os.environ.get(key)
        return None

    def set_setting(self, key: str, value: Any, secret: bool = False) -> None:
        self.settings[key] = value
        logger.debug(f"Runtime setting updated: {key} (secret={secret})")

    @classmethod
    def from_character_file(
        cls, path: str | Path, use_environment: bool = True
    ) -> LocalRuntime:
        """Load a runtime from a character JSON file.

        The agent id is taken from the file's ``id`` field, or derived from
        the character name when absent.

        Args:
            path: Path to the character JSON file
            use_environment: Whether settings fall back to os.environ

        Returns:
            LocalRuntime for the character

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a JSON object
        """
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Character file must contain a JSON object: {path}")

        character = Character.from_dict(data)
        agent_id = data.get("id") or string_to_uuid(character.name or str(path))
        return cls(agent_id=agent_id, character=character, use_environment=use_environment)
