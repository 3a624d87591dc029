# flowershop/domain/entities/views.py
"""
Read models assembled by the catalog service. Media references on these are
already resolved to display URLs for the caller's execution context.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List
from uuid import UUID

from flowershop.domain.entities.bouquet import Bouquet
from flowershop.domain.entities.flower import Flower


@dataclass(frozen=True)
class ResolvedFlower:
    flower: Flower
    quantity: int
    image_url: str


@dataclass(frozen=True)
class DanglingReference:
    """A composition entry whose flower no longer exists."""
    bouquet_id: UUID
    flower_id: UUID
    quantity: int


@dataclass
class BouquetWithFlowers:
    bouquet: Bouquet
    image_url: str
    gallery: List[str] = field(default_factory=list)
    flowers: List[ResolvedFlower] = field(default_factory=list)
    missing: List[DanglingReference] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing

    @property
    def stem_count(self) -> int:
        return sum(f.quantity for f in self.flowers)


@dataclass(frozen=True)
class BouquetCard:
    bouquet: Bouquet
    image_url: str
