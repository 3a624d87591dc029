# flowershop/database/models/media.py
from __future__ import annotations

from typing import Optional, TYPE_CHECKING
from uuid import UUID as UUID_t

from sqlalchemy import BigInteger, Boolean, ForeignKey, Integer, String, Text, text, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flowershop.database.core.main import Base
from flowershop.database.core.service_object import ServiceObject

if TYPE_CHECKING:
    from .catalog import Flower, Bouquet, Category


class MediaColumns:
    """
    Shared shape of the three media tables. `file_path` is relative to the
    storage backend; `file_url`, when present, is absolute and wins.
    """
    media_type: Mapped[str] = mapped_column(String(16), nullable=False, server_default=text("'image'"))
    file_path: Mapped[Optional[str]] = mapped_column(Text)
    file_url: Mapped[Optional[str]] = mapped_column(Text)
    file_name: Mapped[Optional[str]] = mapped_column(Text)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False, server_default=text("0"))
    content_type: Mapped[Optional[str]] = mapped_column(String(128))
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    is_thumbnail: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))


class FlowerMedia(MediaColumns, ServiceObject, Base):
    __tablename__ = "flower_media"
    __table_args__ = (Index("ix_flower_media_flower_id", "flower_id"),)

    flower_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("flower.id", ondelete="CASCADE"), nullable=False
    )
    flower: Mapped["Flower"] = relationship(back_populates="media")

    @property
    def owner_id(self) -> UUID_t:
        return self.flower_id


class BouquetMedia(MediaColumns, ServiceObject, Base):
    __tablename__ = "bouquet_media"
    __table_args__ = (Index("ix_bouquet_media_bouquet_id", "bouquet_id"),)

    bouquet_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("bouquet.id", ondelete="CASCADE"), nullable=False
    )
    bouquet: Mapped["Bouquet"] = relationship(back_populates="media")

    @property
    def owner_id(self) -> UUID_t:
        return self.bouquet_id


class CategoryMedia(MediaColumns, ServiceObject, Base):
    __tablename__ = "category_media"
    __table_args__ = (Index("ix_category_media_category_id", "category_id"),)

    category_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True), ForeignKey("category.id", ondelete="CASCADE"), nullable=False
    )
    category: Mapped["Category"] = relationship(back_populates="media")

    @property
    def owner_id(self) -> UUID_t:
        return self.category_id
