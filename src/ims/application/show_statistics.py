"""Application service: Show Statistics use case (query)."""

from __future__ import annotations

from ims.application.dto import InventoryStatistics
from ims.domain.model.product import ProductKind
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository


class ShowStatisticsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> InventoryStatistics:
        products = self._product_repo.list_all()

        by_kind = {kind: 0 for kind in ProductKind}
        total_value = Money.zero()
        for product in products:
            by_kind[product.kind] += 1
            total_value = total_value + product.inventory_value

        return InventoryStatistics(
            total_products=len(products),
            by_kind=by_kind,
            total_value=total_value,
        )
