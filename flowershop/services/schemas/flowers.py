# flowershop/services/schemas/flowers.py
from __future__ import annotations
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from flowershop.services.schemas.colors import ColorRead
from flowershop.services.schemas.tags import TagRead


class FlowerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    description: Optional[str] = None
    scientific_name: Optional[str] = Field(default=None, max_length=255)
    category_id: Optional[UUID] = None
    in_stock: int = Field(0, ge=0)
    low_stock_threshold: int = Field(0, ge=0)
    is_available: bool = True


class FlowerCreate(FlowerBase):
    pass


class FlowerUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    description: Optional[str] = None
    scientific_name: Optional[str] = Field(default=None, max_length=255)
    category_id: Optional[UUID] = None
    in_stock: Optional[int] = Field(default=None, ge=0)
    low_stock_threshold: Optional[int] = Field(default=None, ge=0)
    is_available: Optional[bool] = None


class FlowerRead(FlowerBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    image_url: Optional[str] = None
    tags: List[TagRead] = []
    colors: List[ColorRead] = []
