# flowershop/database/repos/color_repo.py
from __future__ import annotations

from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flowershop.common.ids import generate_uuid, require_uuid
from flowershop.database.core.errors import store_errors
from flowershop.database.models.catalog import Flower as DBFlower
from flowershop.database.models.taxonomy import Color as DBColor, FlowerColor
from flowershop.database.repos._guards import missing_ids, reject_missing
from flowershop.database.repos._mapping import to_domain_color
from flowershop.domain.entities import Color
from flowershop.domain.errors import InvalidInput
from flowershop.services.schemas.colors import ColorCreate, ColorUpdate

_REQUIRED = ("name", "hex_code")


class SqlAlchemyColorRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_all(self) -> List[Color]:
        stmt = select(DBColor).order_by(DBColor.name.asc(), DBColor.id.asc())
        with store_errors("list colors"):
            return [to_domain_color(c) for c in self.db.execute(stmt).scalars().all()]

    def get_by_id(self, color_id: UUID | str) -> Optional[Color]:
        cid = require_uuid(color_id, "color_id")
        with store_errors("get color"):
            row = self.db.get(DBColor, cid)
            return to_domain_color(row) if row else None

    def _name_taken(self, name: str, except_id: Optional[UUID] = None) -> bool:
        stmt = select(DBColor.id).where(func.lower(DBColor.name) == name.lower())
        if except_id is not None:
            stmt = stmt.where(DBColor.id != except_id)
        return self.db.execute(stmt.limit(1)).first() is not None

    def create(self, data: ColorCreate) -> Color:
        values = data.model_dump()
        reject_missing(values, _REQUIRED)
        name = values["name"].strip()
        with store_errors("create color"):
            if self._name_taken(name):
                raise InvalidInput(f"color {name!r} already exists", field="name")
            obj = DBColor(id=UUID(generate_uuid()), name=name, hex_code=values["hex_code"])
            self.db.add(obj)
            self.db.flush()
            self.db.refresh(obj)
            return to_domain_color(obj)

    def update(self, color_id: UUID | str, data: ColorUpdate) -> Optional[Color]:
        cid = require_uuid(color_id, "color_id")
        values = data.model_dump(exclude_unset=True)
        reject_missing(values, _REQUIRED)
        with store_errors("update color"):
            obj = self.db.get(DBColor, cid)
            if obj is None:
                return None
            if "name" in values:
                name = values["name"].strip()
                if self._name_taken(name, except_id=cid):
                    raise InvalidInput(f"color {name!r} already exists", field="name")
                obj.name = name
            if "hex_code" in values:
                obj.hex_code = values["hex_code"]
            self.db.flush()
            self.db.refresh(obj)
            return to_domain_color(obj)

    def delete(self, color_id: UUID | str) -> bool:
        cid = require_uuid(color_id, "color_id")
        with store_errors("delete color"):
            obj = self.db.get(DBColor, cid)
            if obj is None:
                return False
            self.db.delete(obj)
            self.db.flush()
            # flower_color rows go with ON DELETE CASCADE
            self.db.expire_all()
            return True

    # ----- flower links -----

    def list_for_flower(self, flower_id: UUID | str) -> List[Color]:
        fid = require_uuid(flower_id, "flower_id")
        stmt = (
            select(DBColor)
            .join(FlowerColor, FlowerColor.color_id == DBColor.id)
            .where(FlowerColor.flower_id == fid)
            .order_by(DBColor.name.asc())
        )
        with store_errors("list flower colors"):
            return [to_domain_color(c) for c in self.db.execute(stmt).scalars().all()]

    def set_flower_colors(
        self, flower_id: UUID | str, color_ids: Iterable[UUID | str]
    ) -> Optional[List[Color]]:
        """Replace the flower's color set. None when the flower does not exist."""
        fid = require_uuid(flower_id, "flower_id")
        ids = list(dict.fromkeys(require_uuid(c, "color_id") for c in color_ids))
        with store_errors("set flower colors"):
            flower = self.db.get(DBFlower, fid)
            if flower is None:
                return None
            absent = missing_ids(self.db, DBColor, ids)
            if absent:
                raise InvalidInput(
                    "unknown color ids: " + ", ".join(sorted(str(a) for a in absent)),
                    field="color_ids",
                )
            flower.colors = (
                self.db.execute(
                    select(DBColor).where(DBColor.id.in_(ids)).order_by(DBColor.name.asc())
                ).scalars().all()
                if ids else []
            )
            self.db.flush()
        return self.list_for_flower(fid)
