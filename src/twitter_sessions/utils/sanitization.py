"""Helpers for keeping credentials out of log output."""

REDACTED = "***REDACTED***"

DEFAULT_SENSITIVE_KEYS = frozenset(
    {"password", "secret", "2fa", "token", "api_key", "credential", "email"}
)


def redact_sensitive_data(
    data: dict,
    sensitive_keys: set[str] | frozenset[str] | None = None,
) -> dict:
    """Redact sensitive values from a flat dictionary for safe logging.

    Args:
        data: Dictionary to redact
        sensitive_keys: Set of key substrings to redact. Defaults to
            credential-like keys (password, secret, 2fa, token, email, ...).

    Returns:
        New dictionary with sensitive values replaced with "***REDACTED***"
    """
    if sensitive_keys is None:
        sensitive_keys = DEFAULT_SENSITIVE_KEYS

    return {
        key: REDACTED if any(sk in str(key).lower() for sk in sensitive_keys) else value
        for key, value in data.items()
    }


def mask_value(value: str | None, visible: int = 2) -> str:
    """Mask all but the first ``visible`` characters of a value.

    Used for usernames, which are useful in logs but should not be printed
    in full next to a credential verdict.
    """
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return value[:visible] + "*" * (len(value) - visible)
