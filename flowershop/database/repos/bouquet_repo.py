# flowershop/database/repos/bouquet_repo.py
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy import and_, delete, func, or_, select
from sqlalchemy.orm import Session

from flowershop.common.ids import generate_uuid, require_uuid
from flowershop.database.core.errors import store_errors
from flowershop.database.models.catalog import (
    Bouquet as DBBouquet,
    BouquetFlower as DBBouquetFlower,
    Category as DBCategory,
    Flower as DBFlower,
)
from flowershop.database.repos._guards import ensure_exists, missing_ids, reject_missing
from flowershop.database.repos._mapping import to_domain_bouquet, to_domain_bouquet_flower
from flowershop.domain.entities import Bouquet, BouquetFlower, composition_pair
from flowershop.domain.errors import InvalidInput
from flowershop.services.schemas.bouquets import BouquetCreate, BouquetUpdate, CompositionEntry

_REQUIRED = ("name", "price", "featured", "in_stock")

EntryLike = Union[CompositionEntry, BouquetFlower, Tuple[Union[UUID, str], int]]


class SqlAlchemyBouquetRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    # -------- Reads --------

    def get_all(self) -> List[Bouquet]:
        stmt = select(DBBouquet).order_by(DBBouquet.name.asc(), DBBouquet.id.asc())
        with store_errors("list bouquets"):
            return [to_domain_bouquet(r) for r in self.db.execute(stmt).scalars().all()]

    def get_by_id(self, bouquet_id: UUID | str) -> Optional[Bouquet]:
        bid = require_uuid(bouquet_id, "bouquet_id")
        with store_errors("get bouquet"):
            row = self.db.get(DBBouquet, bid)
            return to_domain_bouquet(row) if row else None

    def list_featured(self) -> List[Bouquet]:
        stmt = (
            select(DBBouquet)
            .where(DBBouquet.featured.is_(True))
            .order_by(DBBouquet.name.asc(), DBBouquet.id.asc())
        )
        with store_errors("list featured bouquets"):
            return [to_domain_bouquet(r) for r in self.db.execute(stmt).scalars().all()]

    def list_by_category(self, category_id: UUID | str) -> List[Bouquet]:
        cid = require_uuid(category_id, "category_id")
        stmt = (
            select(DBBouquet)
            .where(DBBouquet.category_id == cid)
            .order_by(DBBouquet.name.asc(), DBBouquet.id.asc())
        )
        with store_errors("list bouquets by category"):
            return [to_domain_bouquet(r) for r in self.db.execute(stmt).scalars().all()]

    def search(
        self,
        q: Optional[str] = None,
        *,
        featured: Optional[bool] = None,
        in_stock: Optional[bool] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        limit: int = 25,
    ) -> List[Bouquet]:
        """
        Filtered listing. `q` matches name or description case-insensitively;
        price bounds are inclusive and apply to the list price. Unset filters
        are ignored.
        """
        if min_price is not None and max_price is not None and min_price > max_price:
            raise InvalidInput("min_price must not exceed max_price", field="min_price")
        q = (q or "").strip().lower()
        stmt = select(DBBouquet)
        if q:
            pattern = f"%{q}%"
            stmt = stmt.where(or_(
                func.lower(DBBouquet.name).like(pattern),
                func.lower(DBBouquet.description).like(pattern),
            ))
        if featured is not None:
            stmt = stmt.where(DBBouquet.featured.is_(featured))
        if in_stock is not None:
            stmt = stmt.where(DBBouquet.in_stock.is_(in_stock))
        if min_price is not None:
            stmt = stmt.where(DBBouquet.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(DBBouquet.price <= max_price)
        stmt = stmt.order_by(DBBouquet.name.asc(), DBBouquet.id.asc()).limit(limit)
        with store_errors("search bouquets"):
            return [to_domain_bouquet(r) for r in self.db.execute(stmt).scalars().all()]

    # -------- Writes --------

    def create(self, data: BouquetCreate) -> Bouquet:
        values = data.model_dump()
        reject_missing(values, _REQUIRED)
        with store_errors("create bouquet"):
            values["category_id"] = ensure_exists(
                self.db, DBCategory, values.get("category_id"), field="category_id"
            )
            obj = DBBouquet(id=UUID(generate_uuid()), **values)
            self.db.add(obj)
            self.db.flush()
            self.db.refresh(obj)
            return to_domain_bouquet(obj)

    def update(self, bouquet_id: UUID | str, data: BouquetUpdate) -> Optional[Bouquet]:
        bid = require_uuid(bouquet_id, "bouquet_id")
        values = data.model_dump(exclude_unset=True)
        reject_missing(values, _REQUIRED)
        with store_errors("update bouquet"):
            obj = self.db.get(DBBouquet, bid)
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
            return to_domain_bouquet(obj)

    def delete(self, bouquet_id: UUID | str) -> bool:
        bid = require_uuid(bouquet_id, "bouquet_id")
        with store_errors("delete bouquet"):
            obj = self.db.get(DBBouquet, bid)
            if obj is None:
                return False
            self.db.delete(obj)
            self.db.flush()
            return True

    # -------- Composition --------

    def get_composition(self, bouquet_id: UUID | str) -> List[BouquetFlower]:
        """
        Composition entries of a bouquet, in display order. An unknown
        bouquet has no entries.
        """
        bid = require_uuid(bouquet_id, "bouquet_id")
        stmt = (
            select(DBBouquetFlower)
            .where(DBBouquetFlower.bouquet_id == bid)
            .order_by(DBBouquetFlower.position.asc(), DBBouquetFlower.flower_id.asc())
        )
        with store_errors("get bouquet composition"):
            rows = self.db.execute(stmt).scalars().all()
            return [to_domain_bouquet_flower(r) for r in rows]

    def set_composition(
        self, bouquet_id: UUID | str, entries: Iterable[EntryLike]
    ) -> Optional[List[BouquetFlower]]:
        """
        Replace the whole composition of a bouquet in one unit of work.

        Returns None when the bouquet does not exist. Every flower must exist
        and appear at most once, otherwise nothing is written.
        """
        bid = require_uuid(bouquet_id, "bouquet_id")
        pairs = [composition_pair(e) for e in entries]
        seen = set()
        for fid, _ in pairs:
            if fid in seen:
                raise InvalidInput(f"flower {fid} listed more than once", field="flowers")
            seen.add(fid)

        with store_errors("set bouquet composition"):
            if self.db.get(DBBouquet, bid) is None:
                return None
            absent = missing_ids(self.db, DBFlower, seen)
            if absent:
                raise InvalidInput(
                    "unknown flower ids: " + ", ".join(sorted(str(a) for a in absent)),
                    field="flowers",
                )
            self.db.execute(delete(DBBouquetFlower).where(DBBouquetFlower.bouquet_id == bid))
            for pos, (fid, qty) in enumerate(pairs):
                self.db.add(DBBouquetFlower(
                    id=UUID(generate_uuid()), bouquet_id=bid, flower_id=fid, quantity=qty, position=pos,
                ))
            self.db.flush()
            self.db.expire_all()
        return self.get_composition(bid)

    def add_flower(
        self, bouquet_id: UUID | str, flower_id: UUID | str, quantity: int = 1
    ) -> Optional[BouquetFlower]:
        """Add stems of a flower, or overwrite the quantity if already present."""
        bid = require_uuid(bouquet_id, "bouquet_id")
        fid, qty = composition_pair((flower_id, quantity))
        with store_errors("add flower to bouquet"):
            if self.db.get(DBBouquet, bid) is None:
                return None
            ensure_exists(self.db, DBFlower, fid, field="flower_id")

            existing = self.db.execute(
                select(DBBouquetFlower).where(
                    and_(DBBouquetFlower.bouquet_id == bid, DBBouquetFlower.flower_id == fid)
                ).limit(1)
            ).scalars().first()
            if existing:
                existing.quantity = qty
                self.db.flush()
                return to_domain_bouquet_flower(existing)

            next_pos = self.db.execute(
                select(func.coalesce(func.max(DBBouquetFlower.position) + 1, 0))
                .where(DBBouquetFlower.bouquet_id == bid)
            ).scalar_one()
            link = DBBouquetFlower(
                id=UUID(generate_uuid()), bouquet_id=bid, flower_id=fid, quantity=qty, position=next_pos,
            )
            self.db.add(link)
            self.db.flush()
            return to_domain_bouquet_flower(link)

    def remove_flower(self, bouquet_id: UUID | str, flower_id: UUID | str) -> bool:
        bid = require_uuid(bouquet_id, "bouquet_id")
        fid = require_uuid(flower_id, "flower_id")
        with store_errors("remove flower from bouquet"):
            link = self.db.execute(
                select(DBBouquetFlower).where(
                    and_(DBBouquetFlower.bouquet_id == bid, DBBouquetFlower.flower_id == fid)
                ).limit(1)
            ).scalars().first()
            if link is None:
                return False
            self.db.delete(link)
            self.db.flush()
            return True
