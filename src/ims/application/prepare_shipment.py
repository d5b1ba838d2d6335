"""Application service: Prepare Shipment use case.

Ships an existing physical product outside of a sale, e.g. to quote a
customer before they buy.  Asking for a shipment of a digital product
is a caller error (CapabilityError).
"""

from __future__ import annotations

import structlog

from ims.domain.exceptions import NotFoundError
from ims.domain.model.capabilities import ShipmentSummary
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.fulfillment_service import FulfillmentService

logger = structlog.get_logger(__name__)


class PrepareShipmentHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        fulfillment: FulfillmentService,
    ) -> None:
        self._product_repo = product_repo
        self._fulfillment = fulfillment

    def handle(self, product_id: str, address: str) -> ShipmentSummary:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        summary = self._fulfillment.prepare_shipment(product, address)
        logger.info(
            "shipment_prepared",
            product_id=product_id,
            distance_km=summary.distance_km,
            cost=str(summary.cost.amount),
        )
        return summary
