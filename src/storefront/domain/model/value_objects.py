"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from storefront.domain.exceptions import ValidationError

# Product ids keep the type they were stored with: "1" and 1 are distinct.
ProductId = Union[str, int]

# Prices are kept exactly as supplied and only parsed when summed.
Price = Union[str, int, float, None]


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so that summing prices at checkout does not pick up
    floating-point noise. The sign is not checked: the catalog accepts
    whatever price an admin enters.
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

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely.

        Booleans are rejected even though Python treats them as ints.
        """
        if isinstance(amount, bool) or amount is None:
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


def coerce_product_id(value: object) -> ProductId:
    """Validate a product id without changing its type."""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValidationError(f"Product id must be a string or integer, got {value!r}")
    return value


def coerce_price(value: object) -> Price:
    """Validate that a price is a JSON scalar, keeping it as supplied."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float, type(None))):
        raise ValidationError(f"Product price must be a number or string, got {value!r}")
    return value
