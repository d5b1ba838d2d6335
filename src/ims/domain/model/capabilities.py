"""Capability interfaces attached to product variants.

Shippable belongs to physical products only, Downloadable to digital
products only.  A product never exposes both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ims.domain.model.value_objects import Money


@dataclass(frozen=True)
class ShipmentSummary:
    """Everything the warehouse needs to dispatch a physical item."""

    product_id: str
    product_name: str
    address: str
    weight_kg: float
    dimensions: str
    distance_km: int
    cost: Money


class Shippable(ABC):

    @abstractmethod
    def estimate_shipping_cost(self, destination: str) -> Money:
        """Return the cost of shipping one unit to ``destination``."""

    @abstractmethod
    def prepare_shipment(self, destination_address: str) -> ShipmentSummary:
        """Build a fulfillment summary for ``destination_address``."""


class Downloadable(ABC):

    @abstractmethod
    def verify_license(self, user_id: str) -> bool:
        """True iff ``user_id`` holds an active license."""

    @abstractmethod
    def activate_license(self, user_id: str) -> None:
        """Grant ``user_id`` a license (idempotent)."""

    @abstractmethod
    def revoke_license(self, user_id: str) -> None:
        """Withdraw ``user_id``'s license (no error if absent)."""

    @abstractmethod
    def generate_download_link(self) -> str:
        """Return a download URL carrying a fresh token."""
