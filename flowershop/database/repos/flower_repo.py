# flowershop/database/repos/flower_repo.py
from __future__ import annotations

from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from flowershop.common.ids import generate_uuid, require_uuid
from flowershop.database.core.errors import store_errors
from flowershop.database.models.catalog import Category as DBCategory, Flower as DBFlower
from flowershop.database.models.taxonomy import FlowerColor
from flowershop.database.repos._guards import ensure_exists, reject_missing
from flowershop.database.repos._mapping import to_domain_flower
from flowershop.domain.entities import Flower
from flowershop.services.schemas.flowers import FlowerCreate, FlowerUpdate

_REQUIRED = ("name", "price", "in_stock", "low_stock_threshold", "is_available")


class SqlAlchemyFlowerRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    # -------- Reads --------

    def get_all(self, *, available_only: bool = False) -> List[Flower]:
        stmt = select(DBFlower).order_by(DBFlower.name.asc(), DBFlower.id.asc())
        if available_only:
            stmt = stmt.where(DBFlower.is_available.is_(True))
        with store_errors("list flowers"):
            rows = self.db.execute(stmt).scalars().all()
            return [to_domain_flower(r) for r in rows]

    def get_by_id(self, flower_id: UUID | str) -> Optional[Flower]:
        fid = require_uuid(flower_id, "flower_id")
        with store_errors("get flower"):
            row = self.db.get(DBFlower, fid)
            return to_domain_flower(row) if row else None

    def get_by_ids(self, flower_ids: Iterable[UUID | str]) -> List[Flower]:
        """Batch lookup; unknown ids are simply absent from the result."""
        ids = {require_uuid(f, "flower_id") for f in flower_ids}
        if not ids:
            return []
        stmt = (
            select(DBFlower)
            .where(DBFlower.id.in_(ids))
            .order_by(DBFlower.name.asc(), DBFlower.id.asc())
        )
        with store_errors("get flowers"):
            rows = self.db.execute(stmt).scalars().all()
            return [to_domain_flower(r) for r in rows]

    def search(self, q: str, limit: int = 25) -> List[Flower]:
        q = (q or "").strip().lower()
        stmt = select(DBFlower)
        if q:
            pattern = f"%{q}%"
            stmt = stmt.where(or_(
                func.lower(DBFlower.name).like(pattern),
                func.lower(DBFlower.description).like(pattern),
                func.lower(DBFlower.scientific_name).like(pattern),
            ))
        stmt = stmt.order_by(DBFlower.name.asc(), DBFlower.id.asc()).limit(limit)
        with store_errors("search flowers"):
            rows = self.db.execute(stmt).scalars().all()
            return [to_domain_flower(r) for r in rows]

    def list_by_category(self, category_id: UUID | str) -> List[Flower]:
        cid = require_uuid(category_id, "category_id")
        stmt = (
            select(DBFlower)
            .where(DBFlower.category_id == cid)
            .order_by(DBFlower.name.asc(), DBFlower.id.asc())
        )
        with store_errors("list flowers by category"):
            rows = self.db.execute(stmt).scalars().all()
            return [to_domain_flower(r) for r in rows]

    def list_by_color(self, color_id: UUID | str) -> List[Flower]:
        cid = require_uuid(color_id, "color_id")
        stmt = (
            select(DBFlower)
            .join(FlowerColor, FlowerColor.flower_id == DBFlower.id)
            .where(FlowerColor.color_id == cid)
            .order_by(DBFlower.name.asc(), DBFlower.id.asc())
        )
        with store_errors("list flowers by color"):
            rows = self.db.execute(stmt).scalars().all()
            return [to_domain_flower(r) for r in rows]

    # -------- Writes --------

    def create(self, data: FlowerCreate) -> Flower:
        values = data.model_dump()
        reject_missing(values, _REQUIRED)
        with store_errors("create flower"):
            values["category_id"] = ensure_exists(
                self.db, DBCategory, values.get("category_id"), field="category_id"
            )
            obj = DBFlower(id=UUID(generate_uuid()), **values)
            self.db.add(obj)
            self.db.flush()
            self.db.refresh(obj)
            return to_domain_flower(obj)

    def update(self, flower_id: UUID | str, data: FlowerUpdate) -> Optional[Flower]:
        fid = require_uuid(flower_id, "flower_id")
        values = data.model_dump(exclude_unset=True)
        reject_missing(values, _REQUIRED)
        with store_errors("update flower"):
            obj = self.db.get(DBFlower, fid)
            if obj is None:
                return None
            if "category_id" in values:
                values["category_id"] = ensure_exists(
                    self.db, DBCategory, values["category_id"], field="category_id"
                )
            for k, v in values.items():
                setattr(obj, k, v)
            self.db.flush()
            self.db.refresh(obj)
            return to_domain_flower(obj)

    def delete(self, flower_id: UUID | str) -> bool:
        fid = require_uuid(flower_id, "flower_id")
        with store_errors("delete flower"):
            obj = self.db.get(DBFlower, fid)
            if obj is None:
                return False
            self.db.delete(obj)
            self.db.flush()
            return True
