"""Application service: Register Product use case."""

from __future__ import annotations

import structlog

from ims.domain.exceptions import DuplicateKeyError
from ims.domain.model.product import Product, ProductDescription
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RegisterProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product: Product) -> ProductDescription:
        """Add an already-validated product to the inventory.

        A duplicate ID is reported back to the caller as
        DuplicateKeyError; the store keeps the original product.
        """
        try:
            self._product_repo.add(product)
        except DuplicateKeyError:
            logger.warning("product_registration_rejected", product_id=product.id)
            raise

        logger.info(
            "product_registered",
            product_id=product.id,
            name=product.name,
            kind=product.kind.value,
        )
        return product.describe()
