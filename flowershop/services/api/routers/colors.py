# flowershop/services/api/routers/colors.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from flowershop.common.settings import get_settings
from flowershop.database.repos.color_repo import SqlAlchemyColorRepo
from flowershop.database.repos.flower_repo import SqlAlchemyFlowerRepo
from flowershop.domain.ports.media import MediaUrlResolver
from flowershop.services.api.deps import get_server_resolver, transactional_session
from flowershop.services.mappers.catalog import to_flower_read
from flowershop.services.schemas import ColorCreate, ColorRead, ColorUpdate, FlowerRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/colors", tags=["colors"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Color not found")


@router.get("", response_model=List[ColorRead])
def list_colors(db: Session = Depends(transactional_session)) -> List[ColorRead]:
    return [ColorRead.model_validate(c) for c in SqlAlchemyColorRepo(db).get_all()]


@router.post("", response_model=ColorRead, status_code=HTTPStatus.CREATED)
def create_color(payload: ColorCreate, db: Session = Depends(transactional_session)) -> ColorRead:
    return ColorRead.model_validate(SqlAlchemyColorRepo(db).create(payload))


@router.get("/{color_id}", response_model=ColorRead)
def get_color(color_id: str, db: Session = Depends(transactional_session)) -> ColorRead:
    obj = SqlAlchemyColorRepo(db).get_by_id(color_id)
    if obj is None:
        raise _not_found()
    return ColorRead.model_validate(obj)


@router.patch("/{color_id}", response_model=ColorRead)
def update_color(color_id: str, payload: ColorUpdate, db: Session = Depends(transactional_session)) -> ColorRead:
    obj = SqlAlchemyColorRepo(db).update(color_id, payload)
    if obj is None:
        raise _not_found()
    return ColorRead.model_validate(obj)


@router.delete("/{color_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_color(color_id: str, db: Session = Depends(transactional_session)) -> None:
    if not SqlAlchemyColorRepo(db).delete(color_id):
        raise _not_found()
    return None


@router.get("/{color_id}/flowers", response_model=List[FlowerRead])
def list_color_flowers(
    color_id: str,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> List[FlowerRead]:
    if SqlAlchemyColorRepo(db).get_by_id(color_id) is None:
        raise _not_found()
    return [to_flower_read(f, resolver) for f in SqlAlchemyFlowerRepo(db).list_by_color(color_id)]
