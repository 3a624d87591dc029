# flowershop/database/repos/media_repo.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Type
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from flowershop.common.ids import generate_uuid, require_uuid
from flowershop.database.core.errors import store_errors
from flowershop.database.models.catalog import (
    Bouquet as DBBouquet,
    Category as DBCategory,
    Flower as DBFlower,
)
from flowershop.database.models.media import BouquetMedia, CategoryMedia, FlowerMedia
from flowershop.database.repos._mapping import to_domain_media
from flowershop.domain.entities import MediaItem
from flowershop.domain.enums import MediaOwner
from flowershop.domain.errors import InvalidInput
from flowershop.services.schemas.media import MediaCreate

# owner kind -> (media table, owner table, FK column name)
_TABLES: Dict[MediaOwner, Tuple[Type, Type, str]] = {
    MediaOwner.flower: (FlowerMedia, DBFlower, "flower_id"),
    MediaOwner.bouquet: (BouquetMedia, DBBouquet, "bouquet_id"),
    MediaOwner.category: (CategoryMedia, DBCategory, "category_id"),
}


def _tables(owner: MediaOwner | str) -> Tuple[MediaOwner, Type, Type, str]:
    try:
        kind = MediaOwner(owner)
    except ValueError:
        raise InvalidInput(f"unknown media owner: {owner!r}", field="owner") from None
    media_model, owner_model, fk = _TABLES[kind]
    return kind, media_model, owner_model, fk


class SqlAlchemyMediaRepo:
    """Image references attached to flowers, bouquets and categories."""

    def __init__(self, session: Session) -> None:
        self.db = session

    def list_for(self, owner: MediaOwner | str, owner_id: UUID | str) -> Optional[List[MediaItem]]:
        """Gallery in display order. None when the owner does not exist."""
        kind, model, owner_model, fk = _tables(owner)
        oid = require_uuid(owner_id, fk)
        stmt = (
            select(model)
            .where(getattr(model, fk) == oid)
            .order_by(model.display_order.asc(), model.date_created.asc(), model.id.asc())
        )
        with store_errors(f"list {kind} media"):
            if self.db.get(owner_model, oid) is None:
                return None
            return [to_domain_media(r, kind) for r in self.db.execute(stmt).scalars().all()]

    def get(self, owner: MediaOwner | str, media_id: UUID | str) -> Optional[MediaItem]:
        kind, model, _, _ = _tables(owner)
        mid = require_uuid(media_id, "media_id")
        with store_errors(f"get {kind} media"):
            row = self.db.get(model, mid)
            return to_domain_media(row, kind) if row else None

    def add(self, owner: MediaOwner | str, owner_id: UUID | str, data: MediaCreate) -> Optional[MediaItem]:
        """
        Attach a media reference. None when the owner does not exist.
        Flagging the new row as thumbnail clears the flag on its siblings.
        """
        kind, model, owner_model, fk = _tables(owner)
        oid = require_uuid(owner_id, fk)
        values = data.model_dump()
        if not (values.get("file_path") or values.get("file_url")):
            raise InvalidInput("file_path or file_url is required", field="file_path")

        with store_errors(f"add {kind} media"):
            parent = self.db.get(owner_model, oid)
            if parent is None:
                return None
            if values.get("is_thumbnail"):
                self._clear_thumbnail(model, fk, oid)
            row = model(id=UUID(generate_uuid()), **{fk: oid}, **values)
            self.db.add(row)
            self.db.flush()
            self.db.refresh(row)
            self.db.expire(parent, ["media"])
            return to_domain_media(row, kind)

    def delete(self, owner: MediaOwner | str, media_id: UUID | str) -> bool:
        kind, model, owner_model, fk = _tables(owner)
        mid = require_uuid(media_id, "media_id")
        with store_errors(f"delete {kind} media"):
            row = self.db.get(model, mid)
            if row is None:
                return False
            parent = self.db.get(owner_model, getattr(row, fk))
            self.db.delete(row)
            self.db.flush()
            if parent is not None:
                self.db.expire(parent, ["media"])
            return True

    def set_thumbnail(self, owner: MediaOwner | str, owner_id: UUID | str, media_id: UUID | str) -> bool:
        """Make one media row the owner's thumbnail. False if it is not the owner's."""
        kind, model, _, fk = _tables(owner)
        oid = require_uuid(owner_id, fk)
        mid = require_uuid(media_id, "media_id")
        with store_errors(f"set {kind} thumbnail"):
            row = self.db.get(model, mid)
            if row is None or getattr(row, fk) != oid:
                return False
            self._clear_thumbnail(model, fk, oid)
            row.is_thumbnail = True
            self.db.flush()
            return True

    def _clear_thumbnail(self, model: Type, fk: str, owner_id: UUID) -> None:
        self.db.execute(
            update(model)
            .where(getattr(model, fk) == owner_id, model.is_thumbnail.is_(True))
            .values(is_thumbnail=False)
            .execution_options(synchronize_session="fetch")
        )
