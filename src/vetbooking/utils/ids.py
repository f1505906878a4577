"""Document id helpers."""

import re
import secrets
from typing import Any

_OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")


def new_object_id() -> str:
    """Generate a 24 character hexadecimal document id."""
    return secrets.token_hex(12)


def is_object_id(value: Any) -> bool:
    """Check that a value is a 24 character hexadecimal id string."""
    return isinstance(value, str) and _OBJECT_ID_RE.fullmatch(value) is not None


def ref_id(value: Any) -> str | None:
    """Return the id behind a reference field.

    A reference is either a bare id or an expanded document carrying
    an ``_id``.
    """
    if isinstance(value, dict):
        value = value.get("_id")
    return None if value is None else str(value)
