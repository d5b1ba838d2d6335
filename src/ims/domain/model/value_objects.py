"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ims.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Zero is a legal amount
    (free products exist); negative amounts are not.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def scale(self, factor: Decimal) -> Money:
        """Multiply by a non-integer factor, rounding half-up to cents."""
        result = (self.amount * Decimal(factor)).quantize(_CENTS, rounding=ROUND_HALF_UP)
        return Money(result, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot sell or restock zero or
    negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class WeightTiers:
    """Weight-based multipliers applied on top of the distance cost.

    Items heavier than ``heavy_threshold_kg`` pay ``heavy_factor``;
    items heavier than ``medium_threshold_kg`` (up to and including the
    heavy threshold) pay ``medium_factor``; everything else pays 1.
    """

    medium_threshold_kg: float = 5.0
    heavy_threshold_kg: float = 10.0
    medium_factor: Decimal = Decimal("1.2")
    heavy_factor: Decimal = Decimal("1.5")

    def __post_init__(self) -> None:
        if self.medium_threshold_kg <= 0:
            raise ValidationError("Medium weight threshold must be positive")
        if self.heavy_threshold_kg <= self.medium_threshold_kg:
            raise ValidationError(
                "Heavy weight threshold must be greater than the medium threshold"
            )
        if self.medium_factor < Decimal("1") or self.heavy_factor < self.medium_factor:
            raise ValidationError(
                "Weight factors must satisfy 1 <= medium factor <= heavy factor"
            )

    def factor_for(self, weight_kg: float) -> Decimal:
        if weight_kg > self.heavy_threshold_kg:
            return self.heavy_factor
        if weight_kg > self.medium_threshold_kg:
            return self.medium_factor
        return Decimal("1")
