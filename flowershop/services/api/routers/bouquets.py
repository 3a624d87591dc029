# flowershop/services/api/routers/bouquets.py
from __future__ import annotations

from decimal import Decimal
from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from flowershop.common.settings import get_settings
from flowershop.database.repos.bouquet_repo import SqlAlchemyBouquetRepo
from flowershop.database.repos.tag_repo import SqlAlchemyTagRepo
from flowershop.domain.ports.media import MediaUrlResolver
from flowershop.services.api.deps import (
    get_catalog_service, get_server_resolver, transactional_session,
)
from flowershop.services.catalog import CatalogService
from flowershop.services.mappers.catalog import to_bouquet_read, to_bouquet_with_flowers_read
from flowershop.services.schemas import (
    BouquetCreate,
    BouquetRead,
    BouquetUpdate,
    BouquetWithFlowersRead,
    CompositionEntry,
    CompositionSet,
    CustomBouquetQuote,
    TagAssign,
    TagRead,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/bouquets", tags=["bouquets"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Bouquet not found")


def _entries(rows) -> List[CompositionEntry]:
    return [CompositionEntry(flower_id=r.flower_id, quantity=r.quantity) for r in rows]


# ---- listing ----

@router.get("", response_model=List[BouquetRead])
def list_bouquets(
    q: Optional[str] = Query(None, description="Case-insensitive substring of the name or description"),
    featured: Optional[bool] = Query(None),
    in_stock: Optional[bool] = Query(None),
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    limit: int = Query(25, ge=1, le=200),
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> List[BouquetRead]:
    repo = SqlAlchemyBouquetRepo(db)
    filters = dict(featured=featured, in_stock=in_stock, min_price=min_price, max_price=max_price)
    if q or any(v is not None for v in filters.values()):
        rows = repo.search(q, limit=limit, **filters)
    else:
        rows = repo.get_all()
    return [to_bouquet_read(b, resolver) for b in rows]


@router.get("/featured", response_model=List[BouquetRead])
def list_featured_bouquets(svc: CatalogService = Depends(get_catalog_service)) -> List[BouquetRead]:
    out = []
    for card in svc.get_featured_bouquets():
        dto = BouquetRead.model_validate(card.bouquet)
        dto.image_url = card.image_url
        out.append(dto)
    return out


@router.post("/custom/quote", response_model=CustomBouquetQuote)
def quote_custom_bouquet(
    payload: CompositionSet,
    svc: CatalogService = Depends(get_catalog_service),
) -> CustomBouquetQuote:
    return CustomBouquetQuote(total=svc.custom_bouquet_price(payload.flowers))


# ---- CRUD ----

@router.post("", response_model=BouquetRead, status_code=HTTPStatus.CREATED)
def create_bouquet(
    payload: BouquetCreate,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> BouquetRead:
    return to_bouquet_read(SqlAlchemyBouquetRepo(db).create(payload), resolver)


@router.get("/{bouquet_id}", response_model=BouquetRead)
def get_bouquet(
    bouquet_id: str,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> BouquetRead:
    obj = SqlAlchemyBouquetRepo(db).get_by_id(bouquet_id)
    if obj is None:
        raise _not_found()
    return to_bouquet_read(obj, resolver)


@router.patch("/{bouquet_id}", response_model=BouquetRead)
def update_bouquet(
    bouquet_id: str,
    payload: BouquetUpdate,
    db: Session = Depends(transactional_session),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> BouquetRead:
    obj = SqlAlchemyBouquetRepo(db).update(bouquet_id, payload)
    if obj is None:
        raise _not_found()
    return to_bouquet_read(obj, resolver)


@router.delete("/{bouquet_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_bouquet(
    bouquet_id: str,
    db: Session = Depends(transactional_session),
) -> None:
    if not SqlAlchemyBouquetRepo(db).delete(bouquet_id):
        raise _not_found()
    return None


# ---- composition ----

@router.get("/{bouquet_id}/flowers", response_model=BouquetWithFlowersRead)
def get_bouquet_with_flowers(
    bouquet_id: str,
    svc: CatalogService = Depends(get_catalog_service),
    resolver: MediaUrlResolver = Depends(get_server_resolver),
) -> BouquetWithFlowersRead:
    view = svc.get_bouquet_with_flowers(bouquet_id)
    if view is None:
        raise _not_found()
    return to_bouquet_with_flowers_read(view, resolver)


@router.get("/{bouquet_id}/composition", response_model=List[CompositionEntry])
def get_composition(
    bouquet_id: str,
    db: Session = Depends(transactional_session),
) -> List[CompositionEntry]:
    repo = SqlAlchemyBouquetRepo(db)
    if repo.get_by_id(bouquet_id) is None:
        raise _not_found()
    return _entries(repo.get_composition(bouquet_id))


@router.put("/{bouquet_id}/composition", response_model=List[CompositionEntry])
def set_composition(
    bouquet_id: str,
    payload: CompositionSet,
    db: Session = Depends(transactional_session),
) -> List[CompositionEntry]:
    rows = SqlAlchemyBouquetRepo(db).set_composition(bouquet_id, payload.flowers)
    if rows is None:
        raise _not_found()
    return _entries(rows)


@router.post("/{bouquet_id}/composition", response_model=CompositionEntry, status_code=HTTPStatus.CREATED)
def add_flower_to_bouquet(
    bouquet_id: str,
    payload: CompositionEntry,
    db: Session = Depends(transactional_session),
) -> CompositionEntry:
    row = SqlAlchemyBouquetRepo(db).add_flower(bouquet_id, payload.flower_id, payload.quantity)
    if row is None:
        raise _not_found()
    return CompositionEntry(flower_id=row.flower_id, quantity=row.quantity)


@router.delete("/{bouquet_id}/composition/{flower_id}", status_code=HTTPStatus.NO_CONTENT)
def remove_flower_from_bouquet(
    bouquet_id: str,
    flower_id: str,
    db: Session = Depends(transactional_session),
) -> None:
    if not SqlAlchemyBouquetRepo(db).remove_flower(bouquet_id, flower_id):
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Flower not in bouquet")
    return None


# ---- tags ----

@router.get("/{bouquet_id}/tags", response_model=List[TagRead])
def list_bouquet_tags(
    bouquet_id: str,
    db: Session = Depends(transactional_session),
) -> List[TagRead]:
    if SqlAlchemyBouquetRepo(db).get_by_id(bouquet_id) is None:
        raise _not_found()
    return [TagRead.model_validate(t) for t in SqlAlchemyTagRepo(db).list_for_bouquet(bouquet_id)]


@router.put("/{bouquet_id}/tags", response_model=List[TagRead])
def set_bouquet_tags(
    bouquet_id: str,
    payload: TagAssign,
    db: Session = Depends(transactional_session),
) -> List[TagRead]:
    tags = SqlAlchemyTagRepo(db).set_bouquet_tags(bouquet_id, payload.tag_ids)
    if tags is None:
        raise _not_found()
    return [TagRead.model_validate(t) for t in tags]
