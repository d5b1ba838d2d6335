"""Product aggregate: the shared part of every sellable item.

A product is exactly one of two variants (physical or digital), told
apart by its ``kind`` discriminant.  Identity, name and price are fixed
at construction; stock is the only field that ever changes, and only
through ``adjust_stock``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ims.domain.exceptions import InsufficientStockError, ValidationError
from ims.domain.model.capabilities import Downloadable, Shippable
from ims.domain.model.value_objects import Money


class ProductKind(Enum):
    PHYSICAL = "PHYSICAL"
    DIGITAL = "DIGITAL"

    @classmethod
    def parse(cls, raw: str) -> ProductKind:
        """Case-insensitive lookup, e.g. ``"physical"`` -> PHYSICAL."""
        try:
            return cls(raw.strip().upper())
        except (AttributeError, ValueError) as exc:
            raise ValidationError(
                f"Unknown product kind {raw!r} (expected physical or digital)"
            ) from exc


@dataclass(frozen=True)
class ProductDescription:
    """Read-only snapshot of a product, as handed to display code.

    ``details`` holds the variant-specific attributes in display order.
    """

    id: str
    name: str
    kind: ProductKind
    price: Money
    stock: int
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def inventory_value(self) -> Money:
        return self.price * self.stock


def _require_text(value: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


class Product(ABC):
    """Aggregate root shared by both product variants.

    Invariants:
    - ``id`` and ``name`` are non-empty and never change
    - ``price`` is a non-negative ``Money``
    - ``stock`` is a non-negative int at all times
    """

    kind: ProductKind

    def __init__(self, id: str, name: str, price: Money, stock: int) -> None:
        self._id = _require_text(id, "Product ID")
        self._name = _require_text(name, "Product name")

        if not isinstance(price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(price).__name__}"
            )
        self._price = price

        if not isinstance(stock, int) or isinstance(stock, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(stock).__name__}"
            )
        if stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {stock}")
        self._stock = stock

    # --- Identity & state -----------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Money:
        return self._price

    @property
    def stock(self) -> int:
        return self._stock

    @property
    def inventory_value(self) -> Money:
        return self._price * self._stock

    # --- Mutation -------------------------------------------------------------

    def adjust_stock(self, delta: int) -> int:
        """Apply a signed stock change and return the new stock.

        Positive ``delta`` restocks, negative consumes.  Raises
        InsufficientStockError (and leaves stock untouched) if the
        result would be negative.
        """
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise ValidationError(
                f"Stock adjustment must be an integer, got {type(delta).__name__}"
            )
        new_stock = self._stock + delta
        if new_stock < 0:
            raise InsufficientStockError(
                f"Insufficient stock for {self._name} "
                f"(need {-delta}, have {self._stock})"
            )
        self._stock = new_stock
        return new_stock

    # --- Capability queries ---------------------------------------------------

    def as_shippable(self) -> Shippable | None:
        """Return the shipping capability, or None for non-physical products."""
        return None

    def as_downloadable(self) -> Downloadable | None:
        """Return the download capability, or None for non-digital products."""
        return None

    # --- Display --------------------------------------------------------------

    def describe(self) -> ProductDescription:
        return ProductDescription(
            id=self._id,
            name=self._name,
            kind=self.kind,
            price=self._price,
            stock=self._stock,
            details=self._details(),
        )

    @abstractmethod
    def _details(self) -> dict[str, Any]:
        """Variant-specific attributes for ``describe()``."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, name={self._name!r}, "
            f"price={self._price}, stock={self._stock})"
        )
