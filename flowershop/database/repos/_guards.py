# flowershop/database/repos/_guards.py
from __future__ import annotations

from typing import Any, Iterable, Optional, Set, Type
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from flowershop.common.ids import require_uuid
from flowershop.domain.errors import InvalidInput


def ensure_exists(db: Session, model: Type[Any], ref: Optional[UUID | str], *, field: str) -> Optional[UUID]:
    """
    Validate an optional foreign key before it reaches the store.
    None passes through (the column is nullable); anything else must point
    at an existing row.
    """
    if ref is None:
        return None
    key = require_uuid(ref, field)
    if db.get(model, key) is None:
        raise InvalidInput(f"{field} refers to a missing row: {key}", field=field)
    return key


def missing_ids(db: Session, model: Type[Any], ids: Iterable[UUID]) -> Set[UUID]:
    wanted = set(ids)
    if not wanted:
        return set()
    found = set(db.execute(select(model.id).where(model.id.in_(wanted))).scalars().all())
    return wanted - found


def reject_missing(values: dict, required: Iterable[str]) -> None:
    """Required fields present in `values` may not be null or blank."""
    for name in required:
        if name not in values:
            continue
        v = values[name]
        if v is None or (isinstance(v, str) and not v.strip()):
            raise InvalidInput(f"{name} is required", field=name)
