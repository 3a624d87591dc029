# flowershop/domain/entities/flower.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from flowershop.domain.entities.media_item import MediaItem, pick_primary
from flowershop.domain.entities.color import Color
from flowershop.domain.entities.tag import Tag
from flowershop.domain.errors import InvalidInput


@dataclass
class Flower:
    """
    A single stem type sold on its own or used inside bouquets.
    `price` is per stem. `in_stock` is a stem count; `is_available`
    controls whether the storefront shows the flower at all.
    """
    id: Optional[UUID] = None
    name: str = ""
    price: Decimal = Decimal("0")
    description: Optional[str] = None
    scientific_name: Optional[str] = None
    category_id: Optional[UUID] = None
    in_stock: int = 0
    low_stock_threshold: int = 0
    is_available: bool = True
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None

    media: List[MediaItem] = field(default_factory=list)
    tags: List[Tag] = field(default_factory=list)
    colors: List[Color] = field(default_factory=list)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidInput("flower name is required", field="name")
        if self.price is None or Decimal(self.price) < 0:
            raise InvalidInput("price must be >= 0", field="price")
        if self.in_stock is not None and self.in_stock < 0:
            raise InvalidInput("in_stock must be >= 0", field="in_stock")

    @property
    def primary_media(self) -> Optional[MediaItem]:
        return pick_primary(self.media)

    @property
    def low_on_stock(self) -> bool:
        return self.in_stock <= self.low_stock_threshold
