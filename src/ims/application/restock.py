"""Application service: Restock use case."""

from __future__ import annotations

import structlog

from ims.domain.exceptions import NotFoundError
from ims.domain.model.value_objects import Quantity
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RestockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, quantity: int) -> int:
        """Add ``quantity`` units to a product's stock and return the new level."""
        qty = Quantity(quantity)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        new_stock = product.adjust_stock(qty.value)
        logger.info(
            "product_restocked",
            product_id=product_id,
            quantity=qty.value,
            stock=new_stock,
        )
        return new_stock
