"""Builds product variants from raw input plus configured defaults.

Shipping rates, the download URL and the format allow-list are
configuration concerns; the factory injects them so callers only
supply what describes the item itself.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import Decimal

from ims.domain.model.digital_product import DigitalProduct
from ims.domain.model.physical_product import PhysicalProduct
from ims.domain.model.value_objects import Money, WeightTiers
from ims.domain.service.distance_estimator import DistanceEstimator

PriceInput = str | float | int | Decimal | Money


def _to_money(value: PriceInput) -> Money:
    if isinstance(value, Money):
        return value
    return Money.of(value)


class ProductFactory:

    def __init__(
        self,
        download_base_url: str,
        cost_per_km: Money,
        weight_tiers: WeightTiers | None = None,
        allowed_formats: Iterable[str] | None = None,
        distance_estimator: DistanceEstimator | None = None,
        token_factory: Callable[[], str] | None = None,
    ) -> None:
        self._download_base_url = download_base_url
        self._cost_per_km = cost_per_km
        self._weight_tiers = weight_tiers or WeightTiers()
        self._allowed_formats = tuple(allowed_formats or ())
        self._distance_estimator = distance_estimator
        self._token_factory = token_factory

    def physical(
        self,
        id: str,
        name: str,
        price: PriceInput,
        stock: int,
        weight_kg: float,
        dimensions: str,
    ) -> PhysicalProduct:
        return PhysicalProduct(
            id=id,
            name=name,
            price=_to_money(price),
            stock=stock,
            weight_kg=weight_kg,
            dimensions=dimensions,
            cost_per_km=self._cost_per_km,
            weight_tiers=self._weight_tiers,
            distance_estimator=self._distance_estimator,
        )

    def digital(
        self,
        id: str,
        name: str,
        price: PriceInput,
        stock: int,
        file_size_mb: float,
        format: str,
    ) -> DigitalProduct:
        extra = {"token_factory": self._token_factory} if self._token_factory else {}
        return DigitalProduct(
            id=id,
            name=name,
            price=_to_money(price),
            stock=stock,
            file_size_mb=file_size_mb,
            format=format,
            download_base_url=self._download_base_url,
            allowed_formats=self._allowed_formats or None,
            **extra,
        )
