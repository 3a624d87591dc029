# flowershop/domain/entities/bouquet.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional, Tuple
from uuid import UUID

from flowershop.common.ids import require_uuid
from flowershop.domain.entities.media_item import MediaItem, pick_primary
from flowershop.domain.entities.tag import Tag
from flowershop.domain.errors import InvalidInput


@dataclass
class Bouquet:
    id: Optional[UUID] = None
    name: str = ""
    price: Decimal = Decimal("0")
    discount_price: Optional[Decimal] = None
    description: Optional[str] = None
    category_id: Optional[UUID] = None
    featured: bool = False
    in_stock: bool = True
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None

    media: List[MediaItem] = field(default_factory=list)
    tags: List[Tag] = field(default_factory=list)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidInput("bouquet name is required", field="name")
        if self.price is None or Decimal(self.price) < 0:
            raise InvalidInput("price must be >= 0", field="price")
        if self.discount_price is not None and Decimal(self.discount_price) < 0:
            raise InvalidInput("discount_price must be >= 0", field="discount_price")

    @property
    def primary_media(self) -> Optional[MediaItem]:
        return pick_primary(self.media)

    @property
    def effective_price(self) -> Decimal:
        if self.discount_price is not None and self.discount_price < self.price:
            return self.discount_price
        return self.price


@dataclass(frozen=True)
class BouquetFlower:
    """
    One composition entry: `quantity` stems of `flower_id` in `bouquet_id`.
    The pair (bouquet_id, flower_id) is unique.
    """
    bouquet_id: UUID
    flower_id: UUID
    quantity: int = 1
    id: Optional[UUID] = None

    def __post_init__(self):
        if not self.bouquet_id:
            raise InvalidInput("bouquet_id is required", field="bouquet_id")
        if not self.flower_id:
            raise InvalidInput("flower_id is required", field="flower_id")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidInput("quantity must be an integer", field="quantity")
        if self.quantity < 1:
            raise InvalidInput("quantity must be >= 1", field="quantity")


def composition_pair(entry: Any) -> Tuple[UUID, int]:
    """
    Normalize a composition entry to (flower_id, quantity).

    `entry` is a (flower_id, quantity) tuple or anything carrying both as
    attributes (BouquetFlower, the API's CompositionEntry).
    """
    if isinstance(entry, tuple):
        flower_id, quantity = entry
    else:
        flower_id, quantity = entry.flower_id, entry.quantity
    fid = require_uuid(flower_id, "flower_id")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidInput("quantity must be an integer >= 1", field="quantity")
    return fid, quantity
