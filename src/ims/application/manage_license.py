"""Application service: activate / revoke licenses on digital products."""

from __future__ import annotations

import structlog

from ims.domain.exceptions import CapabilityError, NotFoundError
from ims.domain.model.capabilities import Downloadable
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class ManageLicenseHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def activate(self, product_id: str, user_id: str) -> None:
        self._downloadable(product_id).activate_license(user_id)
        logger.info("license_activated", product_id=product_id, user_id=user_id)

    def revoke(self, product_id: str, user_id: str) -> None:
        self._downloadable(product_id).revoke_license(user_id)
        logger.info("license_revoked", product_id=product_id, user_id=user_id)

    def _downloadable(self, product_id: str) -> Downloadable:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        downloadable = product.as_downloadable()
        if downloadable is None:
            raise CapabilityError(
                f"Product '{product_id}' is {product.kind.value.lower()} "
                f"and has no licenses"
            )
        return downloadable
