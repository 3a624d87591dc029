# flowershop/database/repos/category_repo.py
from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flowershop.common.ids import generate_uuid, require_uuid
from flowershop.database.core.errors import store_errors
from flowershop.database.models.catalog import Category as DBCategory
from flowershop.database.repos._guards import reject_missing
from flowershop.database.repos._mapping import to_domain_category
from flowershop.domain.entities import Category
from flowershop.domain.errors import InvalidInput
from flowershop.services.schemas.categories import CategoryCreate, CategoryUpdate


class SqlAlchemyCategoryRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def get_all(self) -> List[Category]:
        stmt = select(DBCategory).order_by(DBCategory.name.asc(), DBCategory.id.asc())
        with store_errors("list categories"):
            return [to_domain_category(r) for r in self.db.execute(stmt).scalars().all()]

    def get_by_id(self, category_id: UUID | str) -> Optional[Category]:
        cid = require_uuid(category_id, "category_id")
        with store_errors("get category"):
            row = self.db.get(DBCategory, cid)
            return to_domain_category(row) if row else None

    def _name_taken(self, name: str, *, exclude: Optional[UUID] = None) -> bool:
        stmt = select(DBCategory.id).where(func.lower(DBCategory.name) == name.strip().lower())
        if exclude is not None:
            stmt = stmt.where(DBCategory.id != exclude)
        return self.db.execute(stmt.limit(1)).first() is not None

    def create(self, data: CategoryCreate) -> Category:
        values = data.model_dump()
        reject_missing(values, ("name",))
        values["name"] = values["name"].strip()
        with store_errors("create category"):
            if self._name_taken(values["name"]):
                raise InvalidInput(f"category {values['name']!r} already exists", field="name")
            obj = DBCategory(id=UUID(generate_uuid()), **values)
            self.db.add(obj)
            self.db.flush()
            self.db.refresh(obj)
            return to_domain_category(obj)

    def update(self, category_id: UUID | str, data: CategoryUpdate) -> Optional[Category]:
        cid = require_uuid(category_id, "category_id")
        values = data.model_dump(exclude_unset=True)
        reject_missing(values, ("name",))
        with store_errors("update category"):
            obj = self.db.get(DBCategory, cid)
            if obj is None:
                return None
            if "name" in values:
                values["name"] = values["name"].strip()
                if self._name_taken(values["name"], exclude=cid):
                    raise InvalidInput(f"category {values['name']!r} already exists", field="name")
            for k, v in values.items():
                setattr(obj, k, v)
            self.db.flush()
            self.db.refresh(obj)
            return to_domain_category(obj)

    def delete(self, category_id: UUID | str) -> bool:
        """Flowers and bouquets in the category survive with category_id cleared."""
        cid = require_uuid(category_id, "category_id")
        with store_errors("delete category"):
            obj = self.db.get(DBCategory, cid)
            if obj is None:
                return False
            self.db.delete(obj)
            self.db.flush()
            # ON DELETE SET NULL ran in the store; drop stale copies
            self.db.expire_all()
            return True
