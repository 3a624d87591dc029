# flowershop/services/api/routers/media.py
"""
Media references for the admin uploader. URLs in these payloads are fetched
by the browser, so they go through the client resolver.
"""
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from flowershop.common.settings import get_settings
from flowershop.database.repos.media_repo import SqlAlchemyMediaRepo
from flowershop.domain.enums import MediaOwner
from flowershop.domain.ports.media import MediaUrlResolver
from flowershop.services.api.deps import get_client_resolver, transactional_session
from flowershop.services.mappers.catalog import to_media_read, to_media_reads
from flowershop.services.schemas import MediaCreate, MediaRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/media", tags=["media"])


@router.get("/{owner}/{owner_id}", response_model=List[MediaRead])
def list_media(
    owner: MediaOwner,
    owner_id: str,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_client_resolver),
) -> List[MediaRead]:
    items = SqlAlchemyMediaRepo(db).list_for(owner, owner_id)
    if items is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=f"{owner.value.title()} not found")
    return to_media_reads(items, resolver)


@router.post("/{owner}/{owner_id}", response_model=MediaRead, status_code=HTTPStatus.CREATED)
def add_media(
    owner: MediaOwner,
    owner_id: str,
    payload: MediaCreate,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_client_resolver),
) -> MediaRead:
    item = SqlAlchemyMediaRepo(db).add(owner, owner_id, payload)
    if item is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=f"{owner.value.title()} not found")
    return to_media_read(item, resolver)


@router.put("/{owner}/{owner_id}/thumbnail/{media_id}", status_code=HTTPStatus.NO_CONTENT)
def set_thumbnail(
    owner: MediaOwner,
    owner_id: str,
    media_id: str,
    db: Session = Depends(transactional_session),
) -> None:
    if not SqlAlchemyMediaRepo(db).set_thumbnail(owner, owner_id, media_id):
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Media not found")
    return None


@router.delete("/{owner}/items/{media_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_media(
    owner: MediaOwner,
    media_id: str,
    db: Session = Depends(transactional_session),
) -> None:
    if not SqlAlchemyMediaRepo(db).delete(owner, media_id):
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Media not found")
    return None
