from flowershop.domain.entities.media_item import MediaItem, pick_primary
from flowershop.domain.entities.tag import Tag
from flowershop.domain.entities.color import Color, normalize_hex
from flowershop.domain.entities.category import Category
from flowershop.domain.entities.flower import Flower
from flowershop.domain.entities.bouquet import Bouquet, BouquetFlower, composition_pair
from flowershop.domain.entities.views import (
    ResolvedFlower,
    DanglingReference,
    BouquetWithFlowers,
    BouquetCard,
)

__all__ = [
    "MediaItem",
    "pick_primary",
    "Tag",
    "Color",
    "normalize_hex",
    "Category",
    "Flower",
    "Bouquet",
    "BouquetFlower",
    "composition_pair",
    "ResolvedFlower",
    "DanglingReference",
    "BouquetWithFlowers",
    "BouquetCard",
]
