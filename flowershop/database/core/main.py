# flowershop/database/core/main.py
from __future__ import annotations

import threading
from functools import lru_cache
from typing import List, Optional

from sqlalchemy import MetaData, create_engine, event, Column, Table
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from flowershop.common.settings import DBConfig, get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

_serviceobject_first = ("id", "date_created", "last_updated")


def _app_schema(schema: Optional[str]) -> Optional[str]:
    return schema if schema and schema.lower() != "public" else None


class Base(DeclarativeBase):
    metadata = MetaData(
        schema=_app_schema(_settings.db_schema),
        naming_convention=NAMING_CONVENTION,
    )

    @classmethod
    def __table_cls__(cls, *args, **kw):
        """Reorder columns so ServiceObject fields come first."""
        if not args:
            return super().__table_cls__(*args, **kw)

        name, metadata, *rest = args
        cols: List[Column] = [x for x in rest if isinstance(x, Column)]
        others = [x for x in rest if not isinstance(x, Column)]

        priority = {n: i for i, n in enumerate(_serviceobject_first)}
        original_index = {c: i for i, c in enumerate(cols)}
        cols.sort(key=lambda c: (priority.get(c.name, 10_000), original_index[c]))

        return Table(name, metadata, *(cols + others), **kw)


class StoreHandle:
    """
    One engine + session factory per process. Nothing connects until the
    first `engine`/`session()` call; construction after that is guarded so
    concurrent first requests still build exactly one engine.
    """

    def __init__(self, url: str, db: DBConfig | None = None) -> None:
        self.url = url
        self.db = db or DBConfig()
        self._lock = threading.Lock()
        self._engine: Optional[Engine] = None
        self._sessionmaker: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            with self._lock:
                if self._engine is None:
                    self._engine = self._build_engine()
                    self._sessionmaker = sessionmaker(
                        bind=self._engine, expire_on_commit=False, future=True, autoflush=False
                    )
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    def session(self) -> Session:
        self.engine  # noqa: B018 - builds the factory on first use
        return self._sessionmaker()

    def dispose(self) -> None:
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
            self._engine = None
            self._sessionmaker = None

    def _build_engine(self) -> Engine:
        engine = create_engine(
            self.url,
            echo=self.db.echo,
            pool_size=self.db.pool_size,
            max_overflow=self.db.max_overflow,
            pool_pre_ping=self.db.pool_pre_ping,
            pool_recycle=self.db.pool_recycle,
            future=True,
        )
        schema = _app_schema(self.db.schema_name)
        timeout_ms = self.db.statement_timeout_ms

        # App schema first, then public (so extensions remain visible)
        if schema or timeout_ms:
            @event.listens_for(engine, "connect")
            def _on_connect(dbapi_conn, _):
                with dbapi_conn.cursor() as cur:
                    if schema:
                        cur.execute(f'SET search_path TO "{schema}", public')
                    if timeout_ms:
                        cur.execute(f"SET statement_timeout = {int(timeout_ms)}")
                dbapi_conn.commit()

        return engine


@lru_cache(maxsize=1)
def get_store() -> StoreHandle:
    cfg = get_settings()
    return StoreHandle(cfg.database_url, cfg.db)
