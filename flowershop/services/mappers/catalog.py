# flowershop/services/mappers/catalog.py
from __future__ import annotations

from typing import List

from flowershop.domain.entities import (
    Bouquet, BouquetWithFlowers, Category, Flower, MediaItem,
)
from flowershop.domain.ports.media import MediaUrlResolver
from flowershop.services.schemas import (
    BouquetFlowerRead,
    BouquetRead,
    BouquetWithFlowersRead,
    CategoryRead,
    DanglingReferenceRead,
    FlowerRead,
    MediaRead,
)


def to_flower_read(f: Flower, resolver: MediaUrlResolver) -> FlowerRead:
    dto = FlowerRead.model_validate(f)
    dto.image_url = resolver.resolve(f.primary_media)
    return dto


def to_bouquet_read(b: Bouquet, resolver: MediaUrlResolver) -> BouquetRead:
    dto = BouquetRead.model_validate(b)
    dto.image_url = resolver.resolve(b.primary_media)
    return dto


def to_category_read(c: Category, resolver: MediaUrlResolver) -> CategoryRead:
    dto = CategoryRead.model_validate(c)
    dto.image_url = resolver.resolve(c.primary_media)
    return dto


def to_media_read(m: MediaItem, resolver: MediaUrlResolver) -> MediaRead:
    dto = MediaRead.model_validate(m)
    dto.url = resolver.resolve(m)
    return dto


def to_media_reads(items: List[MediaItem], resolver: MediaUrlResolver) -> List[MediaRead]:
    return [to_media_read(m, resolver) for m in items]


def to_bouquet_with_flowers_read(view: BouquetWithFlowers, resolver: MediaUrlResolver) -> BouquetWithFlowersRead:
    """The view already carries resolved URLs; `resolver` only fills the nested DTOs."""
    return BouquetWithFlowersRead(
        bouquet=to_bouquet_read(view.bouquet, resolver),
        image_url=view.image_url,
        gallery=list(view.gallery),
        flowers=[
            BouquetFlowerRead(
                flower=to_flower_read(rf.flower, resolver),
                quantity=rf.quantity,
                image_url=rf.image_url,
            )
            for rf in view.flowers
        ],
        missing=[DanglingReferenceRead.model_validate(d) for d in view.missing],
        is_complete=view.is_complete,
    )
