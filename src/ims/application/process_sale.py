"""Application service: Process Sale use case.

Orchestrates the Product aggregate (stock decrement) and the
fulfillment domain service (shipment or download).  A sale moves
through Requested -> StockChecked -> Decremented and then ends in
FulfillmentDispatched or FulfillmentSkipped; a failed stock check ends
it in Rejected with no mutation.

Fulfillment failures never roll the sale back: a digital product sold
to an unlicensed buyer keeps its decremented stock and the receipt
reports the skipped download.
"""

from __future__ import annotations

import structlog

from ims.application.dto import SaleReceipt
from ims.domain.exceptions import (
    InsufficientStockError,
    LicenseError,
    NotFoundError,
    ValidationError,
)
from ims.domain.model.sale import SaleStage
from ims.domain.model.value_objects import Quantity
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.fulfillment_service import (
    FulfillmentResult,
    FulfillmentService,
)

logger = structlog.get_logger(__name__)


class ProcessSaleHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        fulfillment: FulfillmentService,
    ) -> None:
        self._product_repo = product_repo
        self._fulfillment = fulfillment

    def handle(
        self,
        product_id: str,
        quantity: int,
        destination: str | None = None,
        user_id: str | None = None,
    ) -> SaleReceipt:
        """Sell ``quantity`` units of a product.

        Steps:
        1. Look up the product (NotFoundError if absent).
        2. Check stock (InsufficientStockError if short, nothing changes).
        3. Decrement stock and compute the total.
        4. Dispatch fulfillment; license/address problems are recorded
           on the receipt instead of aborting the sale.
        """
        qty = Quantity(quantity)
        log = logger.bind(product_id=product_id, quantity=qty.value)
        log.debug("sale_stage", stage=SaleStage.REQUESTED.value)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            log.warning("sale_rejected", stage=SaleStage.REJECTED.value, reason="not_found")
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        if qty.value > product.stock:
            log.warning(
                "sale_rejected",
                stage=SaleStage.REJECTED.value,
                reason="insufficient_stock",
                stock=product.stock,
            )
            raise InsufficientStockError(
                f"Insufficient stock for {product.name} "
                f"(need {qty.value}, have {product.stock})"
            )
        log.debug("sale_stage", stage=SaleStage.STOCK_CHECKED.value)

        remaining = product.adjust_stock(-qty.value)
        total = product.price * qty.value
        log.info(
            "sale_processed",
            stage=SaleStage.DECREMENTED.value,
            total=str(total.amount),
            remaining_stock=remaining,
        )

        fulfillment_error: str | None = None
        try:
            result = self._fulfillment.dispatch(
                product, destination=destination, user_id=user_id
            )
            stage = SaleStage.FULFILLMENT_DISPATCHED
            log.info("fulfillment_dispatched", kind=product.kind.value)
        except (LicenseError, ValidationError) as exc:
            result = FulfillmentResult()
            stage = SaleStage.FULFILLMENT_SKIPPED
            fulfillment_error = str(exc)
            log.warning(
                "fulfillment_skipped",
                kind=product.kind.value,
                reason=fulfillment_error,
            )

        return SaleReceipt(
            product_id=product.id,
            product_name=product.name,
            quantity=qty.value,
            unit_price=product.price,
            total=total,
            remaining_stock=remaining,
            stage=stage,
            shipment=result.shipment,
            download=result.download,
            fulfillment_error=fulfillment_error,
        )
