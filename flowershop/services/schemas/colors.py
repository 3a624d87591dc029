# flowershop/services/schemas/colors.py
from __future__ import annotations
from typing import List, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from flowershop.domain.entities.color import normalize_hex


class ColorBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=64)
    # admin forms post it as "hex"
    hex_code: str = Field(..., validation_alias=AliasChoices("hex_code", "hex"))

    @field_validator("hex_code")
    @classmethod
    def _normalize_hex(cls, v: str) -> str:
        return normalize_hex(v)


class ColorCreate(ColorBase):
    pass


class ColorUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=64)
    hex_code: Optional[str] = Field(default=None, validation_alias=AliasChoices("hex_code", "hex"))

    @field_validator("hex_code")
    @classmethod
    def _normalize_hex(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else normalize_hex(v)


class ColorRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    hex_code: str


class ColorAssign(BaseModel):
    """Replace the full color set of a flower."""
    color_ids: List[UUID] = Field(default_factory=list)
