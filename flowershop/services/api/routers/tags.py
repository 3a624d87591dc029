# flowershop/services/api/routers/tags.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from flowershop.common.settings import get_settings
from flowershop.database.repos.tag_repo import SqlAlchemyTagRepo
from flowershop.services.api.deps import transactional_session
from flowershop.services.schemas import TagCreate, TagRead, TagUpdate

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/tags", tags=["tags"])


def _tag_or_404(repo: SqlAlchemyTagRepo, tag_id: str):
    obj = repo.get_by_id(tag_id)
    if obj is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Tag not found")
    return obj


@router.get("", response_model=List[TagRead])
def list_tags(db: Session = Depends(transactional_session)) -> List[TagRead]:
    return [TagRead.model_validate(t) for t in SqlAlchemyTagRepo(db).get_all()]


@router.post("", response_model=TagRead, status_code=HTTPStatus.CREATED)
def create_tag(payload: TagCreate, db: Session = Depends(transactional_session)) -> TagRead:
    return TagRead.model_validate(SqlAlchemyTagRepo(db).create(payload))


@router.get("/{tag_id}", response_model=TagRead)
def get_tag(tag_id: str, db: Session = Depends(transactional_session)) -> TagRead:
    return TagRead.model_validate(_tag_or_404(SqlAlchemyTagRepo(db), tag_id))


@router.patch("/{tag_id}", response_model=TagRead)
def update_tag(tag_id: str, payload: TagUpdate, db: Session = Depends(transactional_session)) -> TagRead:
    obj = SqlAlchemyTagRepo(db).update(tag_id, payload)
    if obj is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Tag not found")
    return TagRead.model_validate(obj)


@router.delete("/{tag_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_tag(tag_id: str, db: Session = Depends(transactional_session)) -> None:
    if not SqlAlchemyTagRepo(db).delete(tag_id):
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Tag not found")
    return None
