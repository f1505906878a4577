"""Date parsing helpers."""

from datetime import datetime, timezone
from typing import Any


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_datetime(value: Any) -> datetime | None:
    """Parse a request date value.

    Accepts datetimes and ISO 8601 strings (a trailing ``Z`` is read as
    UTC). Naive values are taken to be UTC.

    Args:
        value: Raw value from a request.

    Returns:
        An aware datetime, or None if the value cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
