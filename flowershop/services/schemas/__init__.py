from flowershop.services.schemas.media import (
    MediaCreate,
    MediaRead,
)
from flowershop.services.schemas.tags import (
    TagRead,
    TagCreate,
    TagUpdate,
    TagAssign,
)
from flowershop.services.schemas.colors import (
    ColorRead,
    ColorCreate,
    ColorUpdate,
    ColorAssign,
)
from flowershop.services.schemas.categories import (
    CategoryRead,
    CategoryCreate,
    CategoryUpdate,
)
from flowershop.services.schemas.flowers import (
    FlowerRead,
    FlowerCreate,
    FlowerUpdate,
)
from flowershop.services.schemas.bouquets import (
    BouquetRead,
    BouquetCreate,
    BouquetUpdate,
    CompositionEntry,
    CompositionSet,
    BouquetFlowerRead,
    DanglingReferenceRead,
    BouquetWithFlowersRead,
    CustomBouquetQuote,
)
__all__ = [
    "MediaCreate",
    "MediaRead",
    "TagRead",
    "TagCreate",
    "TagUpdate",
    "TagAssign",
    "ColorRead",
    "ColorCreate",
    "ColorUpdate",
    "ColorAssign",
    "CategoryRead",
    "CategoryCreate",
    "CategoryUpdate",
    "FlowerRead",
    "FlowerCreate",
    "FlowerUpdate",
    "BouquetRead",
    "BouquetCreate",
    "BouquetUpdate",
    "CompositionEntry",
    "CompositionSet",
    "BouquetFlowerRead",
    "DanglingReferenceRead",
    "BouquetWithFlowersRead",
    "CustomBouquetQuote",
]
