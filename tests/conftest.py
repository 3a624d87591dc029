# tests/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from testcontainers.postgres import PostgresContainer

from flowershop.common.settings import get_settings
from flowershop.database.models import Base  # registers every catalog table

APP_SCHEMA = get_settings().db_schema


@pytest.fixture(scope="session")
def _postgres_container():
    cfg = get_settings()
    with PostgresContainer(cfg.test_db_image) as pg:
        # testcontainers hands out a psycopg2 URL; the app runs on psycopg 3
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


def _prepare_schema(engine: Engine, schema: str = APP_SCHEMA) -> None:
    with engine.begin() as conn:
        conn.execute(text(f'create schema if not exists "{schema}"'))
        conn.execute(text("CREATE EXTENSION IF NOT EXISTS pgcrypto"))


@pytest.fixture(scope="session")
def db_engine(_postgres_container) -> Engine:
    engine = create_engine(_postgres_container, future=True)
    _prepare_schema(engine, APP_SCHEMA)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
