from flowershop.services.catalog.service import CatalogService

__all__ = ["CatalogService"]
