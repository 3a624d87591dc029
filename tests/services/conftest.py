# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.orm import Session
from sqlalchemy import text
from starlette.testclient import TestClient

from flowershop.services.api.app import create_app
from flowershop.services.api.deps import transactional_session
from flowershop.common.settings import get_settings

APP_SCHEMA = get_settings().db_schema


@pytest.fixture()
def api_session(db_engine):
    """One Session per test, shared by every request and rolled back at the end."""
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True)
    session.execute(text(f'SET search_path TO "{APP_SCHEMA}", public'))
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        conn.close()


@pytest.fixture()
def api_client(api_session):
    app = create_app()

    def _override():
        yield api_session

    app.dependency_overrides[transactional_session] = _override
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
