# tests/database/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy import text
from sqlalchemy.orm import Session

from flowershop.common.settings import get_settings

APP_SCHEMA = get_settings().db_schema


@pytest.fixture()
def db(db_engine) -> Session:
    """
    Per-test Session bound to an outer transaction that is rolled back after
    the test, so repos can flush freely.
    """
    connection = db_engine.connect()
    trans = connection.begin()
    connection.execute(text(f'SET search_path TO "{APP_SCHEMA}", public'))

    session = Session(bind=connection, future=True)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()
