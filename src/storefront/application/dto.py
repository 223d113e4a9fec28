"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the API/CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Price, ProductId


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    id: ProductId
    name: str
    price: Price  # as stored, e.g. 10 or "10.00"
    display_price: str  # formatted, e.g. "$10.00"
    category: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price,
            display_price=_display(product),
            category=product.category,
        )


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: confirmation of a completed checkout."""

    order_id: int
    username: str
    item_count: int
    total: str  # formatted, e.g. "$10.00"

    @property
    def message(self) -> str:
        return f"Checkout successful! Total: {self.total}"


def _display(product: Product) -> str:
    try:
        return str(product.unit_price())
    except ValidationError:
        return str(product.price)
