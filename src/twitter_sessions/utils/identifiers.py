"""Deterministic identifiers derived from names."""

import uuid


def string_to_uuid(value: str) -> str:
    """Derive a stable UUID string from an arbitrary name.

    The same name always maps to the same id, so the default client and
    file-loaded agents keep their registry keys across restarts.
    """
    return str(uuid.uuid5(uuid.NAMESPACE_URL, str(value)))
