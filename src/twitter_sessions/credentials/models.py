"""Credential fields and the partial credential set."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator, Mapping

from twitter_sessions.utils.sanitization import mask_value, redact_sensitive_data


class CredentialField(str, Enum):
    """Credential settings recognized by the resolver.

    Values are the setting names looked up in the host runtime and the
    character's settings/secrets.
    """

    USERNAME = "TWITTER_USERNAME"
    PASSWORD = "TWITTER_PASSWORD"
    EMAIL = "TWITTER_EMAIL"
    TWO_FACTOR_SECRET = "TWITTER_2FA_SECRET"


# Fields that must all be present before a session may be created
REQUIRED_FIELDS = frozenset({
    CredentialField.USERNAME,
    CredentialField.PASSWORD,
    CredentialField.EMAIL,
})


class CredentialSet(Mapping[CredentialField, str]):
    """Immutable, partial mapping of credential fields to values.

    Absent fields are omitted entirely; a field is never stored as None or
    as an empty string.

    Example:
        >>> creds = CredentialSet({CredentialField.USERNAME: "agent"})
        >>> CredentialField.USERNAME in creds
        True
        >>> creds.is_sufficient
        False
    """

    def __init__(self, values: Mapping[CredentialField | str, Any] | None = None) -> None:
        self._values: dict[CredentialField, str] = {}
        for key, value in (values or {}).items():
            if value is None or value == "":
                continue
            self._values[CredentialField(key)] = value if isinstance(value, str) else str(value)

    def __getitem__(self, key: CredentialField | str) -> str:
        return self._values[CredentialField(key)]

    def __iter__(self) -> Iterator[CredentialField]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        try:
            return CredentialField(key) in self._values
        except ValueError:
            return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CredentialSet):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"CredentialSet({self.to_dict()})"

    @property
    def username(self) -> str | None:
        return self._values.get(CredentialField.USERNAME)

    @property
    def password(self) -> str | None:
        return self._values.get(CredentialField.PASSWORD)

    @property
    def email(self) -> str | None:
        return self._values.get(CredentialField.EMAIL)

    @property
    def two_factor_secret(self) -> str | None:
        return self._values.get(CredentialField.TWO_FACTOR_SECRET)

    @property
    def missing(self) -> list[CredentialField]:
        """Required fields that are not present, in declaration order."""
        return [f for f in CredentialField if f in REQUIRED_FIELDS and f not in self._values]

    @property
    def is_sufficient(self) -> bool:
        """Check whether a session may be created from these credentials."""
        return is_sufficient(self)

    def to_dict(self, redact: bool = True) -> dict[str, str]:
        """Convert to a plain dict keyed by setting name.

        Args:
            redact: Replace secret values and mask the username so the
                result is safe to log

        Returns:
            Dictionary of present fields
        """
        data = {f.value: v for f, v in self._values.items()}
        if not redact:
            return data
        redacted = redact_sensitive_data(data)
        if CredentialField.USERNAME.value in redacted:
            redacted[CredentialField.USERNAME.value] = mask_value(self.username)
        return redacted


def is_sufficient(credentials: Mapping[CredentialField, str]) -> bool:
    """Pure sufficiency predicate.

    Username, password and email must all be present. The two-factor secret
    is optional and never affects the result.
    """
    return all(credentials.get(f) for f in REQUIRED_FIELDS)
