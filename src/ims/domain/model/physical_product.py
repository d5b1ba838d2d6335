"""Physical product variant, shipped by weight and dimensions."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from ims.domain.exceptions import ValidationError
from ims.domain.model.capabilities import Shippable, ShipmentSummary
from ims.domain.model.product import Product, ProductKind
from ims.domain.model.value_objects import Money, WeightTiers
from ims.domain.service.distance_estimator import (
    DistanceEstimator,
    HashDistanceEstimator,
)


class PhysicalProduct(Product, Shippable):
    """A tangible item that must be shipped to the buyer.

    ``cost_per_km`` and ``weight_tiers`` come from configuration; the
    product never hardcodes shipping rates.
    """

    kind = ProductKind.PHYSICAL

    def __init__(
        self,
        id: str,
        name: str,
        price: Money,
        stock: int,
        weight_kg: float,
        dimensions: str,
        cost_per_km: Money,
        weight_tiers: WeightTiers | None = None,
        distance_estimator: DistanceEstimator | None = None,
    ) -> None:
        super().__init__(id, name, price, stock)

        if isinstance(weight_kg, bool) or not isinstance(weight_kg, (int, float)):
            raise ValidationError(
                f"Weight must be a number, got {type(weight_kg).__name__}"
            )
        if not math.isfinite(weight_kg) or weight_kg <= 0:
            raise ValidationError(f"Weight must be greater than zero, got {weight_kg}")

        if not isinstance(dimensions, str) or not dimensions.strip():
            raise ValidationError("Dimensions are required")

        if not isinstance(cost_per_km, Money):
            raise ValidationError(
                f"Cost per km must be Money, got {type(cost_per_km).__name__}"
            )

        self._weight_kg = float(weight_kg)
        self._dimensions = dimensions.strip()
        self._cost_per_km = cost_per_km
        self._weight_tiers = weight_tiers or WeightTiers()
        self._distance_estimator = distance_estimator or HashDistanceEstimator()

    @property
    def weight_kg(self) -> float:
        return self._weight_kg

    @property
    def dimensions(self) -> str:
        return self._dimensions

    @property
    def cost_per_km(self) -> Money:
        return self._cost_per_km

    @property
    def weight_factor(self) -> Decimal:
        return self._weight_tiers.factor_for(self._weight_kg)

    # --- Shippable ------------------------------------------------------------

    def estimate_shipping_cost(self, destination: str) -> Money:
        """Distance x cost-per-km x weight-tier factor, rounded to cents."""
        distance = self._distance_estimator.distance_km(destination)
        return self._cost_per_km.scale(Decimal(distance) * self.weight_factor)

    def prepare_shipment(self, destination_address: str) -> ShipmentSummary:
        if not isinstance(destination_address, str) or not destination_address.strip():
            raise ValidationError("Destination address is required")
        address = destination_address.strip()
        return ShipmentSummary(
            product_id=self.id,
            product_name=self.name,
            address=address,
            weight_kg=self._weight_kg,
            dimensions=self._dimensions,
            distance_km=self._distance_estimator.distance_km(address),
            cost=self.estimate_shipping_cost(address),
        )

    def as_shippable(self) -> Shippable:
        return self

    # --- Display --------------------------------------------------------------

    def _details(self) -> dict[str, Any]:
        return {
            "weight_kg": self._weight_kg,
            "dimensions": self._dimensions,
        }
