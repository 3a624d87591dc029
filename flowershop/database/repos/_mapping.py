# flowershop/database/repos/_mapping.py
from __future__ import annotations

from contextlib import contextmanager

from flowershop.database.models.catalog import (
    Bouquet as DBBouquet,
    BouquetFlower as DBBouquetFlower,
    Category as DBCategory,
    Flower as DBFlower,
)
from flowershop.database.models.taxonomy import Color as DBColor, Tag as DBTag
from flowershop.domain.entities import (
    Bouquet, BouquetFlower, Category, Color, Flower, MediaItem, Tag,
)
from flowershop.domain.enums import MediaOwner
from flowershop.domain.errors import InvalidInput, StoredDataError


@contextmanager
def _stored(kind: str, row):
    """Entity checks failing on a loaded row are a data fault, not caller input."""
    try:
        yield
    except InvalidInput as e:
        raise StoredDataError(
            f"stored {kind} {getattr(row, 'id', None)} is invalid: {e.message}"
        ) from e


def to_domain_media(row, owner: MediaOwner) -> MediaItem:
    with _stored(f"{owner.value} media", row):
        return MediaItem(
            id=row.id,
            owner=owner,
            owner_id=row.owner_id,
            file_path=row.file_path,
            file_url=row.file_url,
            file_name=row.file_name,
            content_type=row.content_type,
            media_type=row.media_type,
            file_size=row.file_size or 0,
            display_order=row.display_order or 0,
            is_thumbnail=bool(row.is_thumbnail),
        )


def to_domain_tag(row: DBTag) -> Tag:
    with _stored("tag", row):
        return Tag(
            id=row.id,
            name=row.name,
            date_created=getattr(row, "date_created", None),
            last_updated=getattr(row, "last_updated", None),
        )


def to_domain_color(row: DBColor) -> Color:
    with _stored("color", row):
        return Color(
            id=row.id,
            name=row.name,
            hex_code=row.hex_code,
            date_created=getattr(row, "date_created", None),
            last_updated=getattr(row, "last_updated", None),
        )


def to_domain_category(row: DBCategory) -> Category:
    media = [to_domain_media(m, MediaOwner.category) for m in row.media]
    with _stored("category", row):
        return Category(
            id=row.id,
            name=row.name,
            description=row.description,
            date_created=getattr(row, "date_created", None),
            last_updated=getattr(row, "last_updated", None),
            media=media,
        )


def to_domain_flower(row: DBFlower) -> Flower:
    media = [to_domain_media(m, MediaOwner.flower) for m in row.media]
    tags = [to_domain_tag(t) for t in row.tags]
    colors = [to_domain_color(c) for c in row.colors]
    with _stored("flower", row):
        return Flower(
            id=row.id,
            name=row.name,
            price=row.price,
            description=row.description,
            scientific_name=row.scientific_name,
            category_id=row.category_id,
            in_stock=row.in_stock or 0,
            low_stock_threshold=row.low_stock_threshold or 0,
            is_available=bool(row.is_available),
            date_created=getattr(row, "date_created", None),
            last_updated=getattr(row, "last_updated", None),
            media=media,
            tags=tags,
            colors=colors,
        )


def to_domain_bouquet(row: DBBouquet) -> Bouquet:
    media = [to_domain_media(m, MediaOwner.bouquet) for m in row.media]
    tags = [to_domain_tag(t) for t in row.tags]
    with _stored("bouquet", row):
        return Bouquet(
            id=row.id,
            name=row.name,
            price=row.price,
            discount_price=row.discount_price,
            description=row.description,
            category_id=row.category_id,
            featured=bool(row.featured),
            in_stock=bool(row.in_stock),
            date_created=getattr(row, "date_created", None),
            last_updated=getattr(row, "last_updated", None),
            media=media,
            tags=tags,
        )


def to_domain_bouquet_flower(row: DBBouquetFlower) -> BouquetFlower:
    with _stored("composition entry", row):
        return BouquetFlower(
            id=row.id,
            bouquet_id=row.bouquet_id,
            flower_id=row.flower_id,
            quantity=row.quantity,
        )
