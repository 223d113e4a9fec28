"""Product aggregate.

Products live independently of orders. Orders keep their own snapshot of
each product, so rewriting a product never changes past orders.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import (
    Money,
    Price,
    ProductId,
    coerce_price,
    coerce_product_id,
)


@dataclass
class Product:
    """A product in the catalog.

    Name, category and price are stored as entered: emptiness, allowed
    values and the sign of the price are not checked. Only the shape of
    the record is enforced. The price is parsed when an order sums it.
    """

    id: ProductId
    name: str
    price: Price
    category: str

    @staticmethod
    def create(
        product_id: object,
        name: object,
        price: object,
        category: object,
    ) -> Product:
        """Build a product from untrusted input, enforcing the record schema."""
        if not isinstance(name, str):
            raise ValidationError("Product name must be a string")
        if not isinstance(category, str):
            raise ValidationError("Product category must be a string")
        return Product(
            id=coerce_product_id(product_id),
            name=name,
            price=coerce_price(price),
            category=category,
        )

    def unit_price(self) -> Money:
        """The price as Money; raises ValidationError if it is not numeric."""
        try:
            return Money.of(self.price)  # type: ignore[arg-type]
        except ValidationError as exc:
            raise ValidationError(
                f"Product {self.id!r} has an invalid price: {self.price!r}"
            ) from exc

    def matches_any(self, requested_ids: list[str]) -> bool:
        """True if this product's id, as a string, is one of *requested_ids*."""
        return str(self.id) in requested_ids
