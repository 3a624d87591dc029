from __future__ import annotations
from enum import StrEnum

class MediaOwner(StrEnum):
    flower = "flower"
    bouquet = "bouquet"
    category = "category"
