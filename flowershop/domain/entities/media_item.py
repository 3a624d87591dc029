# flowershop/domain/entities/media_item.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional
from uuid import UUID

from flowershop.domain.enums import MediaOwner


@dataclass
class MediaItem:
    """
    A reference to one image (or video) attached to a flower, bouquet or
    category. Two shapes are possible:

      - `file_url`: already absolute, used verbatim
      - `file_path`: relative to the storage backend, must be resolved

    When both are set `file_url` wins.
    """
    id: Optional[UUID] = None
    owner: Optional[MediaOwner] = None
    owner_id: Optional[UUID] = None

    file_path: Optional[str] = None
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    content_type: Optional[str] = None
    media_type: str = "image"
    file_size: int = 0

    display_order: int = 0
    is_thumbnail: bool = False

    @property
    def has_reference(self) -> bool:
        return bool(self.file_url or self.file_path)


def pick_primary(media: Iterable[MediaItem]) -> Optional[MediaItem]:
    """The flagged thumbnail if there is one, otherwise the lowest display_order."""
    items = list(media or [])
    if not items:
        return None
    for m in items:
        if m.is_thumbnail:
            return m
    return min(items, key=lambda m: m.display_order)
