"""Parsing of opaque identifiers received from callers."""

from __future__ import annotations

from uuid import UUID


def parse_identifier(value) -> UUID | None:
    """Return the UUID encoded by ``value`` or ``None`` when it is malformed."""

    if isinstance(value, UUID):
        return value
    if value is None:
        return None
    try:
        return UUID(str(value).strip())
    except ValueError:
        return None
