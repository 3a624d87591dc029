# flowershop/services/schemas/bouquets.py
from __future__ import annotations
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from flowershop.services.schemas.flowers import FlowerRead
from flowershop.services.schemas.tags import TagRead


class BouquetBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    discount_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    description: Optional[str] = None
    category_id: Optional[UUID] = None
    featured: bool = False
    in_stock: bool = True


class BouquetCreate(BouquetBase):
    pass


class BouquetUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    discount_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    description: Optional[str] = None
    category_id: Optional[UUID] = None
    featured: Optional[bool] = None
    in_stock: Optional[bool] = None


class BouquetRead(BouquetBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    image_url: Optional[str] = None
    tags: List[TagRead] = []


# ---------- Composition ----------

class CompositionEntry(BaseModel):
    flower_id: UUID
    quantity: int = Field(1, ge=1)


class CompositionSet(BaseModel):
    flowers: List[CompositionEntry] = Field(default_factory=list)


class BouquetFlowerRead(BaseModel):
    flower: FlowerRead
    quantity: int
    image_url: str


class DanglingReferenceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    flower_id: UUID
    quantity: int


class BouquetWithFlowersRead(BaseModel):
    bouquet: BouquetRead
    image_url: str
    gallery: List[str] = []
    flowers: List[BouquetFlowerRead] = []
    missing: List[DanglingReferenceRead] = []
    is_complete: bool = True


class CustomBouquetQuote(BaseModel):
    total: Decimal
