# flowershop/domain/entities/category.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from flowershop.domain.entities.media_item import MediaItem, pick_primary
from flowershop.domain.errors import InvalidInput


@dataclass
class Category:
    """A shelf of the catalog; flowers and bouquets point at it by id."""
    id: Optional[UUID] = None
    name: str = ""
    description: Optional[str] = None
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None

    media: List[MediaItem] = field(default_factory=list)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidInput("category name is required", field="name")

    @property
    def primary_media(self) -> Optional[MediaItem]:
        return pick_primary(self.media)
