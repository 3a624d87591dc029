# flowershop/services/api/routers/categories.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from flowershop.common.settings import get_settings
from flowershop.database.repos.bouquet_repo import SqlAlchemyBouquetRepo
from flowershop.database.repos.category_repo import SqlAlchemyCategoryRepo
from flowershop.database.repos.flower_repo import SqlAlchemyFlowerRepo
from flowershop.domain.ports.media import MediaUrlResolver
from flowershop.services.api.deps import get_server_resolver, transactional_session
from flowershop.services.mappers.catalog import to_bouquet_read, to_category_read, to_flower_read
from flowershop.services.schemas import (
    BouquetRead, CategoryCreate, CategoryRead, CategoryUpdate, FlowerRead,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/categories", tags=["categories"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Category not found")


@router.get("", response_model=List[CategoryRead])
def list_categories(
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> List[CategoryRead]:
    return [to_category_read(c, resolver) for c in SqlAlchemyCategoryRepo(db).get_all()]


@router.post("", response_model=CategoryRead, status_code=HTTPStatus.CREATED)
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> CategoryRead:
    return to_category_read(SqlAlchemyCategoryRepo(db).create(payload), resolver)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(
    category_id: str,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> CategoryRead:
    obj = SqlAlchemyCategoryRepo(db).get_by_id(category_id)
    if obj is None:
        raise _not_found()
    return to_category_read(obj, resolver)


@router.patch("/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: str,
    payload: CategoryUpdate,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> CategoryRead:
    obj = SqlAlchemyCategoryRepo(db).update(category_id, payload)
    if obj is None:
        raise _not_found()
    return to_category_read(obj, resolver)


@router.delete("/{category_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_category(
    category_id: str,
    db: Session = Depends(transactional_session),
) -> None:
    if not SqlAlchemyCategoryRepo(db).delete(category_id):
        raise _not_found()
    return None


@router.get("/{category_id}/flowers", response_model=List[FlowerRead])
def list_category_flowers(
    category_id: str,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> List[FlowerRead]:
    return [to_flower_read(f, resolver) for f in SqlAlchemyFlowerRepo(db).list_by_category(category_id)]


@router.get("/{category_id}/bouquets", response_model=List[BouquetRead])
def list_category_bouquets(
    category_id: str,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> List[BouquetRead]:
    return [to_bouquet_read(b, resolver) for b in SqlAlchemyBouquetRepo(db).list_by_category(category_id)]
