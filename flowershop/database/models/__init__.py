# flowershop/database/models/__init__.py

from flowershop.database.core.main import Base
from flowershop.database.models.catalog import (
    Category,
    Flower,
    Bouquet,
    BouquetFlower,
)
from flowershop.database.models.taxonomy import (
    Tag,
    BouquetTag,
    FlowerTag,
    Color,
    FlowerColor,
)
from flowershop.database.models.media import (
    FlowerMedia,
    BouquetMedia,
    CategoryMedia,
)

__all__ = [
    "Base",
    "Category",
    "Flower",
    "Bouquet",
    "BouquetFlower",
    "Tag",
    "BouquetTag",
    "FlowerTag",
    "Color",
    "FlowerColor",
    "FlowerMedia",
    "BouquetMedia",
    "CategoryMedia",
]
