# flowershop/database/repos/tag_repo.py
from __future__ import annotations

from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flowershop.common.ids import generate_uuid, require_uuid
from flowershop.database.core.errors import store_errors
from flowershop.database.models.catalog import Bouquet as DBBouquet, Flower as DBFlower
from flowershop.database.models.taxonomy import BouquetTag, FlowerTag, Tag as DBTag
from flowershop.database.repos._guards import missing_ids, reject_missing
from flowershop.database.repos._mapping import to_domain_tag
from flowershop.domain.entities import Tag
from flowershop.domain.errors import InvalidInput
from flowershop.services.schemas.tags import TagCreate, TagUpdate


class SqlAlchemyTagRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    # ----- tags -----

    def get_all(self) -> List[Tag]:
        stmt = select(DBTag).order_by(DBTag.name.asc(), DBTag.id.asc())
        with store_errors("list tags"):
            return [to_domain_tag(t) for t in self.db.execute(stmt).scalars().all()]

    def get_by_id(self, tag_id: UUID | str) -> Optional[Tag]:
        tid = require_uuid(tag_id, "tag_id")
        with store_errors("get tag"):
            row = self.db.get(DBTag, tid)
            return to_domain_tag(row) if row else None

    def get_by_name(self, name: str) -> Optional[Tag]:
        stmt = select(DBTag).where(func.lower(DBTag.name) == (name or "").strip().lower()).limit(1)
        with store_errors("get tag by name"):
            row = self.db.execute(stmt).scalars().first()
            return to_domain_tag(row) if row else None

    def create(self, data: TagCreate) -> Tag:
        name = data.name.strip()
        if not name:
            raise InvalidInput("tag name is required", field="name")
        with store_errors("create tag"):
            if self.get_by_name(name) is not None:
                raise InvalidInput(f"tag {name!r} already exists", field="name")
            obj = DBTag(id=UUID(generate_uuid()), name=name)
            self.db.add(obj)
            self.db.flush()
            self.db.refresh(obj)
            return to_domain_tag(obj)

    def update(self, tag_id: UUID | str, data: TagUpdate) -> Optional[Tag]:
        tid = require_uuid(tag_id, "tag_id")
        values = data.model_dump(exclude_unset=True)
        reject_missing(values, ("name",))
        with store_errors("update tag"):
            obj = self.db.get(DBTag, tid)
            if obj is None:
                return None
            if "name" in values:
                name = values["name"].strip()
                other = self.get_by_name(name)
                if other is not None and other.id != tid:
                    raise InvalidInput(f"tag {name!r} already exists", field="name")
                obj.name = name
            self.db.flush()
            self.db.refresh(obj)
            return to_domain_tag(obj)

    def delete(self, tag_id: UUID | str) -> bool:
        tid = require_uuid(tag_id, "tag_id")
        with store_errors("delete tag"):
            obj = self.db.get(DBTag, tid)
            if obj is None:
                return False
            self.db.delete(obj)
            self.db.flush()
            return True

    # ----- bouquet / flower links -----

    def list_for_bouquet(self, bouquet_id: UUID | str) -> List[Tag]:
        bid = require_uuid(bouquet_id, "bouquet_id")
        stmt = (
            select(DBTag)
            .join(BouquetTag, BouquetTag.tag_id == DBTag.id)
            .where(BouquetTag.bouquet_id == bid)
            .order_by(DBTag.name.asc())
        )
        with store_errors("list bouquet tags"):
            return [to_domain_tag(t) for t in self.db.execute(stmt).scalars().all()]

    def list_for_flower(self, flower_id: UUID | str) -> List[Tag]:
        fid = require_uuid(flower_id, "flower_id")
        stmt = (
            select(DBTag)
            .join(FlowerTag, FlowerTag.tag_id == DBTag.id)
            .where(FlowerTag.flower_id == fid)
            .order_by(DBTag.name.asc())
        )
        with store_errors("list flower tags"):
            return [to_domain_tag(t) for t in self.db.execute(stmt).scalars().all()]

    def _load_tags(self, tag_ids: Iterable[UUID | str]) -> List[DBTag]:
        ids = list(dict.fromkeys(require_uuid(t, "tag_id") for t in tag_ids))
        absent = missing_ids(self.db, DBTag, ids)
        if absent:
            raise InvalidInput(
                "unknown tag ids: " + ", ".join(sorted(str(a) for a in absent)), field="tag_ids"
            )
        if not ids:
            return []
        return self.db.execute(
            select(DBTag).where(DBTag.id.in_(ids)).order_by(DBTag.name.asc())
        ).scalars().all()

    def set_bouquet_tags(self, bouquet_id: UUID | str, tag_ids: Iterable[UUID | str]) -> Optional[List[Tag]]:
        """Replace the bouquet's tag set. None when the bouquet does not exist."""
        bid = require_uuid(bouquet_id, "bouquet_id")
        with store_errors("set bouquet tags"):
            bouquet = self.db.get(DBBouquet, bid)
            if bouquet is None:
                return None
            bouquet.tags = self._load_tags(tag_ids)
            self.db.flush()
        return self.list_for_bouquet(bid)

    def set_flower_tags(self, flower_id: UUID | str, tag_ids: Iterable[UUID | str]) -> Optional[List[Tag]]:
        """Replace the flower's tag set. None when the flower does not exist."""
        fid = require_uuid(flower_id, "flower_id")
        with store_errors("set flower tags"):
            flower = self.db.get(DBFlower, fid)
            if flower is None:
                return None
            flower.tags = self._load_tags(tag_ids)
            self.db.flush()
        return self.list_for_flower(fid)
