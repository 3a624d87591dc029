# flowershop/services/schemas/tags.py
from __future__ import annotations
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TagBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)


class TagCreate(TagBase):
    pass


class TagUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=128)


class TagRead(TagBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID


class TagAssign(BaseModel):
    """Replace the full tag set of a bouquet or flower."""
    tag_ids: List[UUID] = Field(default_factory=list)
