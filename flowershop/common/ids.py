# flowershop/common/ids.py
from __future__ import annotations

import re
import uuid
from typing import Union
from uuid import UUID

from flowershop.domain.errors import InvalidInput

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

# Ids from the old integer-keyed catalog are padded into the last group.
_LEGACY_PREFIX = "00000000-0000-0000-0000-"


def is_valid_uuid(value: object) -> bool:
    """True iff `value` is a string shaped 8-4-4-4-12 hex (any case)."""
    return isinstance(value, str) and bool(_UUID_RE.match(value))


def to_uuid(value: Union[str, int, UUID]) -> Union[str, int]:
    """
    Canonicalize an identifier to lowercase hyphenated hex.

      - UUID instances and anything `uuid.UUID` parses -> canonical string
      - ints / digit strings (legacy ids) -> 00000000-0000-0000-0000-<padded>
      - anything else comes back unchanged; callers that need a real UUID
        must go through `require_uuid`.
    """
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if 0 <= value < 10**12:
            return f"{_LEGACY_PREFIX}{value:012d}"
        return value
    if isinstance(value, str):
        s = value.strip()
        if s.isdigit() and len(s) <= 12:
            return f"{_LEGACY_PREFIX}{s.zfill(12)}"
        try:
            return str(UUID(s))
        except ValueError:
            return value
    return value


def generate_uuid() -> str:
    return str(uuid.uuid4())


def require_uuid(value: Union[str, int, UUID, None], what: str = "id") -> UUID:
    """
    Strict gate in front of every store lookup. Accepts a UUID instance or a
    hyphenated UUID string; legacy numeric ids are not padded here, so "123"
    is rejected before any query runs.
    """
    if isinstance(value, UUID):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInput(f"{what} is required", field=what)
    raw = value.strip() if isinstance(value, str) else value
    if not is_valid_uuid(raw):
        raise InvalidInput(f"{what} is not a valid UUID: {value!r}", field=what)
    return UUID(raw)
