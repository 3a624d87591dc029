# flowershop/domain/entities/tag.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from flowershop.domain.errors import InvalidInput


@dataclass
class Tag:
    id: Optional[UUID] = None
    name: str = ""
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidInput("tag name is required", field="name")
