"""Sale lifecycle stages.

Requested -> StockChecked -> {Decremented, Rejected}
Decremented -> {FulfillmentDispatched, FulfillmentSkipped}

Rejected is terminal and leaves stock untouched.  Once a sale reaches
Decremented it stands, whatever happens during fulfillment.
"""

from __future__ import annotations

from enum import Enum


class SaleStage(Enum):
    REQUESTED = "REQUESTED"
    STOCK_CHECKED = "STOCK_CHECKED"
    DECREMENTED = "DECREMENTED"
    REJECTED = "REJECTED"
    FULFILLMENT_DISPATCHED = "FULFILLMENT_DISPATCHED"
    FULFILLMENT_SKIPPED = "FULFILLMENT_SKIPPED"
