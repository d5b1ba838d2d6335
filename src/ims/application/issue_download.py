"""Application service: Issue Download use case.

Unlike the sale flow, there is no completed sale to protect here, so a
missing license propagates to the caller as LicenseError.
"""

from __future__ import annotations

import structlog

from ims.domain.exceptions import NotFoundError
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.fulfillment_service import DownloadGrant, FulfillmentService

logger = structlog.get_logger(__name__)


class IssueDownloadHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        fulfillment: FulfillmentService,
    ) -> None:
        self._product_repo = product_repo
        self._fulfillment = fulfillment

    def handle(self, product_id: str, user_id: str) -> DownloadGrant:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        grant = self._fulfillment.issue_download(product, user_id)
        logger.info("download_issued", product_id=product_id, user_id=grant.user_id)
        return grant
