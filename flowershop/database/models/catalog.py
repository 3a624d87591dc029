# flowershop/database/models/catalog.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional, List, TYPE_CHECKING
from uuid import UUID as UUID_t

from sqlalchemy import (
    Boolean, ForeignKey, Integer, Numeric, String, Text, text,
    UniqueConstraint, CheckConstraint, Index, func,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flowershop.database.core.main import Base
from flowershop.database.core.service_object import ServiceObject

if TYPE_CHECKING:
    from .taxonomy import Color, Tag
    from .media import FlowerMedia, BouquetMedia, CategoryMedia


def _t(name: str):
    """Return Table object from metadata, honoring schema on Base.metadata."""
    schema = Base.metadata.schema
    key = f"{schema}.{name}" if schema else name
    return Base.metadata.tables[key]


# =======================
# Categories
# =======================
class Category(ServiceObject, Base):
    __tablename__ = "category"
    __table_args__ = (
        UniqueConstraint("name", name="uq_category_name"),
    )

    name: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)

    media: Mapped[List["CategoryMedia"]] = relationship(
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CategoryMedia.display_order",
        lazy="selectin",
    )


# =======================
# Flowers
# =======================
class Flower(ServiceObject, Base):
    __tablename__ = "flower"
    __table_args__ = (
        CheckConstraint("price >= 0", name="flower_price_nonneg"),
        CheckConstraint("in_stock >= 0", name="flower_stock_nonneg"),
        Index("ix_flower_category_id", "category_id"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    scientific_name: Mapped[Optional[str]] = mapped_column(String(255))
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    in_stock: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    low_stock_threshold: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))

    category_id: Mapped[Optional[UUID_t]] = mapped_column(
        UUID(as_uuid=True), ForeignKey("category.id", ondelete="SET NULL")
    )

    media: Mapped[List["FlowerMedia"]] = relationship(
        back_populates="flower",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="FlowerMedia.display_order",
        lazy="selectin",
    )
    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary=lambda: _t("flower_tag"),
        back_populates="flowers",
        order_by="Tag.name",
        lazy="selectin",
    )
    colors: Mapped[List["Color"]] = relationship(
        "Color",
        secondary=lambda: _t("flower_color"),
        back_populates="flowers",
        order_by="Color.name",
        lazy="selectin",
    )
Index("ix_flower_name_lower", func.lower(Flower.name))


# =======================
# Bouquets
# =======================
class Bouquet(ServiceObject, Base):
    __tablename__ = "bouquet"
    __table_args__ = (
        CheckConstraint("price >= 0", name="bouquet_price_nonneg"),
        Index("ix_bouquet_category_id", "category_id"),
        Index("ix_bouquet_featured", "featured"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    discount_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2))
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))

    category_id: Mapped[Optional[UUID_t]] = mapped_column(
        UUID(as_uuid=True), ForeignKey("category.id", ondelete="SET NULL")
    )

    composition: Mapped[List["BouquetFlower"]] = relationship(
        back_populates="bouquet", cascade="all, delete-orphan", passive_deletes=True
    )
    media: Mapped[List["BouquetMedia"]] = relationship(
        back_populates="bouquet",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BouquetMedia.display_order",
        lazy="selectin",
    )
    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary=lambda: _t("bouquet_tag"),
        back_populates="bouquets",
        order_by="Tag.name",
        lazy="selectin",
    )


class BouquetFlower(ServiceObject, Base):
    """
    Composition join: which flowers, and how many stems of each, make up a
    bouquet. One row per (bouquet, flower) pair.
    """
    __tablename__ = "bouquet_flower"
    __table_args__ = (
        UniqueConstraint("bouquet_id", "flower_id", name="uq_bouquet_flower_pair"),
        CheckConstraint("quantity >= 1", name="bouquet_flower_quantity_pos"),
        Index("ix_bouquet_flower_bouquet_id", "bouquet_id"),
        Index("ix_bouquet_flower_flower_id", "flower_id"),
    )

    bouquet_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("bouquet.id", ondelete="CASCADE"), nullable=False
    )
    flower_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("flower.id", ondelete="CASCADE"), nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("1"))
    position: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))

    bouquet: Mapped[Bouquet] = relationship(back_populates="composition")
