# flowershop/services/schemas/media.py
from __future__ import annotations
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MediaCreate(BaseModel):
    file_path: Optional[str] = None
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: int = Field(0, ge=0)
    content_type: Optional[str] = None
    media_type: str = "image"
    display_order: int = 0
    is_thumbnail: bool = False

    @model_validator(mode="after")
    def _needs_reference(self):
        if not (self.file_path or self.file_url):
            raise ValueError("file_path or file_url is required")
        return self


class MediaRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    file_path: Optional[str] = None
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    content_type: Optional[str] = None
    media_type: str = "image"
    display_order: int = 0
    is_thumbnail: bool = False

    # display URL resolved for the consumer of this payload
    url: Optional[str] = None
