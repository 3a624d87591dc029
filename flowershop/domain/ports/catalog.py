from __future__ import annotations
from typing import Iterable, List, Optional, Protocol
from uuid import UUID

from flowershop.domain.entities.bouquet import Bouquet, BouquetFlower
from flowershop.domain.entities.flower import Flower


class FlowerQueryPort(Protocol):
    def get_by_id(self, flower_id: UUID | str) -> Optional[Flower]: ...
    def get_by_ids(self, flower_ids: Iterable[UUID | str]) -> List[Flower]: ...


class BouquetQueryPort(Protocol):
    def get_by_id(self, bouquet_id: UUID | str) -> Optional[Bouquet]: ...
    def get_composition(self, bouquet_id: UUID | str) -> List[BouquetFlower]: ...
    def list_featured(self) -> List[Bouquet]: ...
