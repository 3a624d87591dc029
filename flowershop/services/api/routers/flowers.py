# flowershop/services/api/routers/flowers.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from flowershop.common.settings import get_settings
from flowershop.database.repos.color_repo import SqlAlchemyColorRepo
from flowershop.database.repos.flower_repo import SqlAlchemyFlowerRepo
from flowershop.database.repos.tag_repo import SqlAlchemyTagRepo
from flowershop.domain.ports.media import MediaUrlResolver
from flowershop.services.api.deps import get_server_resolver, transactional_session
from flowershop.services.mappers.catalog import to_flower_read
from flowershop.services.schemas import (
    ColorAssign, ColorRead, FlowerCreate, FlowerRead, FlowerUpdate, TagAssign, TagRead,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/flowers", tags=["flowers"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Flower not found")


@router.get("", response_model=List[FlowerRead])
def list_flowers(
    q: Optional[str] = Query(None, description="Case-insensitive substring of name, description or scientific name"),
    limit: int = Query(25, ge=1, le=200),
    available: bool = Query(False, description="Only flowers currently offered"),
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> List[FlowerRead]:
    repo = SqlAlchemyFlowerRepo(db)
    rows = repo.search(q, limit=limit) if q else repo.get_all(available_only=available)
    return [to_flower_read(f, resolver) for f in rows]


@router.post("", response_model=FlowerRead, status_code=HTTPStatus.CREATED)
def create_flower(
    payload: FlowerCreate,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> FlowerRead:
    return to_flower_read(SqlAlchemyFlowerRepo(db).create(payload), resolver)


@router.get("/{flower_id}", response_model=FlowerRead)
def get_flower(
    flower_id: str,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> FlowerRead:
    obj = SqlAlchemyFlowerRepo(db).get_by_id(flower_id)
    if obj is None:
        raise _not_found()
    return to_flower_read(obj, resolver)


@router.patch("/{flower_id}", response_model=FlowerRead)
def update_flower(
    flower_id: str,
    payload: FlowerUpdate,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> FlowerRead:
    obj = SqlAlchemyFlowerRepo(db).update(flower_id, payload)
    if obj is None:
        raise _not_found()
    return to_flower_read(obj, resolver)


@router.delete("/{flower_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_flower(
    flower_id: str,
    db: Session = Depends(transactional_session),
) -> None:
    if not SqlAlchemyFlowerRepo(db).delete(flower_id):
        raise _not_found()
    return None


@router.get("/{flower_id}/tags", response_model=List[TagRead])
def list_flower_tags(
    flower_id: str,
    db: Session = Depends(transactional_session),
) -> List[TagRead]:
    if SqlAlchemyFlowerRepo(db).get_by_id(flower_id) is None:
        raise _not_found()
    return [TagRead.model_validate(t) for t in SqlAlchemyTagRepo(db).list_for_flower(flower_id)]


@router.put("/{flower_id}/tags", response_model=List[TagRead])
def set_flower_tags(
    flower_id: str,
    payload: TagAssign,
    db: Session = Depends(transactional_session),
) -> List[TagRead]:
    tags = SqlAlchemyTagRepo(db).set_flower_tags(flower_id, payload.tag_ids)
    if tags is None:
        raise _not_found()
    return [TagRead.model_validate(t) for t in tags]


@router.get("/{flower_id}/colors", response_model=List[ColorRead])
def list_flower_colors(
    flower_id: str,
    db: Session = Depends(transactional_session),
) -> List[ColorRead]:
    if SqlAlchemyFlowerRepo(db).get_by_id(flower_id) is None:
        raise _not_found()
    return [ColorRead.model_validate(c) for c in SqlAlchemyColorRepo(db).list_for_flower(flower_id)]


@router.put("/{flower_id}/colors", response_model=List[ColorRead])
def set_flower_colors(
    flower_id: str,
    payload: ColorAssign,
    db: Session = Depends(transactional_session),
) -> List[ColorRead]:
    colors = SqlAlchemyColorRepo(db).set_flower_colors(flower_id, payload.color_ids)
    if colors is None:
        raise _not_found()
    return [ColorRead.model_validate(c) for c in colors]
