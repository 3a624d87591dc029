# flowershop/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from flowershop.database.core.main import get_store
from flowershop.database.repos.bouquet_repo import SqlAlchemyBouquetRepo
from flowershop.database.repos.flower_repo import SqlAlchemyFlowerRepo
from flowershop.domain.ports.media import MediaUrlResolver
from flowershop.services.catalog import CatalogService
from flowershop.services.media.resolvers import client_resolver, server_resolver


def get_server_resolver() -> MediaUrlResolver:
    """Resolver for URLs built while handling a request (under /storage)."""
    return server_resolver()


def get_client_resolver() -> MediaUrlResolver:
    """Resolver for URLs a browser will fetch (public media origin or proxy)."""
    return client_resolver()


def get_db(request: Request) -> Generator[Session, None, None]:
    # a handle passed to create_app() wins over the lazily built process one
    store = getattr(request.app.state, "store", None) or get_store()
    db = store.session()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction; COMMIT on normal exit,
    ROLLBACK if an exception bubbles out.
    """
    with db.begin():
        yield db


def get_catalog_service(
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> CatalogService:
    return CatalogService(SqlAlchemyBouquetRepo(db), SqlAlchemyFlowerRepo(db), resolver)
