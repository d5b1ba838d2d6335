"""Application service: Remove Product use case."""

from __future__ import annotations

import structlog

from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        self._product_repo.remove(product_id)
        logger.info("product_removed", product_id=product_id)
