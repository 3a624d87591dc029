# flowershop/database/core/service_object.py
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID as PyUUID

from sqlalchemy import DateTime, func, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, declared_attr


class ServiceObject:
    """
    Mixin providing common columns for persisted catalog rows.
    Use with multiple inheritance: `class Flower(ServiceObject, Base): ...`
    Repositories assign ids client-side; the server default covers rows
    inserted by hand or by migrations.
    """
    __abstract__ = True

    @declared_attr
    def id(cls) -> Mapped[PyUUID]:
        # gen_random_uuid() needs pgcrypto on PG < 13; enabled in migrations
        return mapped_column(
            UUID(as_uuid=True),
            primary_key=True,
            server_default=text("gen_random_uuid()"),
        )

    @declared_attr
    def date_created(cls) -> Mapped[Optional[datetime]]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.clock_timestamp(),
        )

    @declared_attr
    def last_updated(cls) -> Mapped[Optional[datetime]]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.clock_timestamp(),
            onupdate=func.clock_timestamp(),
        )
