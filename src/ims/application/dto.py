"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals (mutable aggregates) to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ims.domain.model.capabilities import ShipmentSummary
from ims.domain.model.product import ProductKind
from ims.domain.model.sale import SaleStage
from ims.domain.model.value_objects import Money
from ims.domain.service.fulfillment_service import DownloadGrant


@dataclass(frozen=True)
class SaleReceipt:
    """Output: confirmation of a completed sale.

    The sale itself always stands; ``stage`` tells whether fulfillment
    was dispatched or skipped, and ``fulfillment_error`` says why it
    was skipped.
    """

    product_id: str
    product_name: str
    quantity: int
    unit_price: Money
    total: Money
    remaining_stock: int
    stage: SaleStage
    shipment: ShipmentSummary | None = None
    download: DownloadGrant | None = None
    fulfillment_error: str | None = None

    @property
    def fulfilled(self) -> bool:
        return self.stage is SaleStage.FULFILLMENT_DISPATCHED


@dataclass(frozen=True)
class InventoryStatistics:
    """Output: aggregate figures over the whole inventory."""

    total_products: int
    by_kind: dict[ProductKind, int] = field(default_factory=dict)
    total_value: Money = field(default_factory=Money.zero)

    @property
    def physical_count(self) -> int:
        return self.by_kind.get(ProductKind.PHYSICAL, 0)

    @property
    def digital_count(self) -> int:
        return self.by_kind.get(ProductKind.DIGITAL, 0)
