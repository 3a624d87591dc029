# flowershop/services/catalog/service.py
from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, List, Optional
from uuid import UUID

from flowershop.common.ids import require_uuid
from flowershop.common.logging import get_logger
from flowershop.domain.entities import (
    BouquetCard,
    BouquetWithFlowers,
    DanglingReference,
    ResolvedFlower,
    composition_pair,
)
from flowershop.domain.errors import InvalidInput
from flowershop.domain.ports.catalog import BouquetQueryPort, FlowerQueryPort
from flowershop.domain.ports.media import MediaUrlResolver
from flowershop.services.media.resolvers import resolve_all, server_resolver

logger = get_logger(__name__)

_CENTS = Decimal("0.01")


class CatalogService:
    """
    Read-side composition over the bouquet and flower repositories.

    The reads are sequential and not isolated from each other: a flower can
    disappear between fetching a composition and fetching its flowers. Such
    entries end up in `BouquetWithFlowers.missing` instead of failing the call.
    """

    def __init__(
        self,
        bouquets: BouquetQueryPort,
        flowers: FlowerQueryPort,
        resolver: Optional[MediaUrlResolver] = None,
    ) -> None:
        self.bouquets = bouquets
        self.flowers = flowers
        self.resolver = resolver or server_resolver()

    def get_bouquet_with_flowers(self, bouquet_id: UUID | str) -> Optional[BouquetWithFlowers]:
        bid = require_uuid(bouquet_id, "bouquet_id")

        bouquet = self.bouquets.get_by_id(bid)
        if bouquet is None:
            return None

        composition = self.bouquets.get_composition(bid)
        by_id = {f.id: f for f in self.flowers.get_by_ids([c.flower_id for c in composition])} if composition else {}

        resolved: List[ResolvedFlower] = []
        missing: List[DanglingReference] = []
        for entry in composition:
            flower = by_id.get(entry.flower_id)
            if flower is None:
                logger.warning(
                    "bouquet %s references missing flower %s (quantity %d)",
                    bid, entry.flower_id, entry.quantity,
                )
                missing.append(DanglingReference(bid, entry.flower_id, entry.quantity))
                continue
            resolved.append(ResolvedFlower(
                flower=flower,
                quantity=entry.quantity,
                image_url=self.resolver.resolve(flower.primary_media),
            ))

        return BouquetWithFlowers(
            bouquet=bouquet,
            image_url=self.resolver.resolve(bouquet.primary_media),
            gallery=resolve_all(self.resolver, bouquet.media),
            flowers=resolved,
            missing=missing,
        )

    def get_featured_bouquets(self) -> List[BouquetCard]:
        return [
            BouquetCard(bouquet=b, image_url=self.resolver.resolve(b.primary_media))
            for b in self.bouquets.list_featured()
        ]

    def custom_bouquet_price(self, entries: Iterable[Any]) -> Decimal:
        """
        Price of a customer-built bouquet: sum of flower price x quantity.
        `entries` are (flower_id, quantity) pairs or objects carrying both.
        """
        pairs = [composition_pair(e) for e in entries]
        if not pairs:
            return Decimal("0.00")

        prices = {f.id: f.price for f in self.flowers.get_by_ids({fid for fid, _ in pairs})}
        unknown = sorted({str(fid) for fid, _ in pairs if fid not in prices})
        if unknown:
            raise InvalidInput("unknown flower ids: " + ", ".join(unknown), field="flowers")

        total = sum((Decimal(prices[fid]) * qty for fid, qty in pairs), Decimal("0"))
        return total.quantize(_CENTS)
