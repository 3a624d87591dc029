# flowershop/database/models/taxonomy.py
from __future__ import annotations

from typing import List, TYPE_CHECKING
from uuid import UUID as UUID_t

from sqlalchemy import CheckConstraint, ForeignKey, String, UniqueConstraint, Index, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flowershop.database.core.main import Base
from flowershop.database.core.service_object import ServiceObject

if TYPE_CHECKING:
    from .catalog import Flower, Bouquet


def _t(name: str):
    """Return Table object from metadata, honoring schema on Base.metadata."""
    schema = Base.metadata.schema
    key = f"{schema}.{name}" if schema else name
    return Base.metadata.tables[key]


# =======================
# Tags
# =======================
class Tag(ServiceObject, Base):
    __tablename__ = "tag"
    __table_args__ = (
        UniqueConstraint("name", name="uq_tag_name"),
    )

    name: Mapped[str] = mapped_column(String(128), nullable=False)

    bouquets: Mapped[List["Bouquet"]] = relationship(
        "Bouquet",
        secondary=lambda: _t("bouquet_tag"),
        back_populates="tags",
    )
    flowers: Mapped[List["Flower"]] = relationship(
        "Flower",
        secondary=lambda: _t("flower_tag"),
        back_populates="tags",
    )
Index("ix_tag_name_lower", func.lower(Tag.name))


class BouquetTag(Base):
    __tablename__ = "bouquet_tag"
    __table_args__ = (
        Index("ix_bouquet_tag_tag_id", "tag_id"),
    )

    bouquet_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("bouquet.id", ondelete="CASCADE"), primary_key=True
    )
    tag_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("tag.id", ondelete="CASCADE"), primary_key=True
    )


class FlowerTag(Base):
    __tablename__ = "flower_tag"
    __table_args__ = (
        Index("ix_flower_tag_tag_id", "tag_id"),
    )

    flower_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("flower.id", ondelete="CASCADE"), primary_key=True
    )
    tag_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("tag.id", ondelete="CASCADE"), primary_key=True
    )


# =======================
# Colors
# =======================
class Color(ServiceObject, Base):
    __tablename__ = "color"
    __table_args__ = (
        UniqueConstraint("name", name="uq_color_name"),
        CheckConstraint("hex_code ~ '^#[0-9a-f]{6}$'", name="color_hex_code_format"),
    )

    name: Mapped[str] = mapped_column(String(64), nullable=False)
    hex_code: Mapped[str] = mapped_column(String(7), nullable=False)

    flowers: Mapped[List["Flower"]] = relationship(
        "Flower",
        secondary=lambda: _t("flower_color"),
        back_populates="colors",
    )
Index("ix_color_name_lower", func.lower(Color.name))


class FlowerColor(Base):
    __tablename__ = "flower_color"
    __table_args__ = (
        Index("ix_flower_color_color_id", "color_id"),
    )

    flower_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("flower.id", ondelete="CASCADE"), primary_key=True
    )
    color_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("color.id", ondelete="CASCADE"), primary_key=True
    )
