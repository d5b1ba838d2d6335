"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ims.application.product_factory import ProductFactory
from ims.domain.model.value_objects import Money, WeightTiers
from ims.domain.service.fulfillment_service import FulfillmentService
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from ims.infrastructure.persistence.json_catalog_loader import JsonCatalogLoader
from ims.infrastructure.settings import InventorySettings


@dataclass
class AppContext:
    """Everything a CLI command needs, built once per invocation."""

    factory: ProductFactory
    product_repo: InMemoryProductRepository
    fulfillment: FulfillmentService


def product_factory(settings: InventorySettings) -> ProductFactory:
    return ProductFactory(
        download_base_url=settings.download_base_url,
        cost_per_km=Money(settings.cost_per_km),
        weight_tiers=WeightTiers(
            medium_threshold_kg=settings.medium_weight_kg,
            heavy_threshold_kg=settings.heavy_weight_kg,
            medium_factor=settings.medium_weight_factor,
            heavy_factor=settings.heavy_weight_factor,
        ),
        allowed_formats=settings.allowed_digital_formats,
    )


def fulfillment_service(settings: InventorySettings) -> FulfillmentService:
    return FulfillmentService(default_address=settings.default_shipping_address)


def build_context(
    catalog: Path | None = None,
    settings: InventorySettings | None = None,
) -> AppContext:
    settings = settings or InventorySettings()
    factory = product_factory(settings)
    products = JsonCatalogLoader(catalog, factory).load() if catalog else []
    return AppContext(
        factory=factory,
        product_repo=InMemoryProductRepository(products),
        fulfillment=fulfillment_service(settings),
    )
