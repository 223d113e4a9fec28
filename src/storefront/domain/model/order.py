"""Order aggregate, the record written by checkout.

Orders are append-only: once placed they are never changed or deleted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import NoValidProductsError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders. It snapshots the products and
    computes the total. The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders as they were stored.
    """

    id: int | None
    username: str
    products: list[Product]
    total_price: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(username: str, products: list[Product]) -> Order:
        """Create a new order for *username* from the selected products."""
        if not username:
            raise ValidationError("Orders require an authenticated username")
        if not products:
            raise NoValidProductsError("Invalid products selected.")

        snapshot = [
            Product(id=p.id, name=p.name, price=p.price, category=p.category)
            for p in products
        ]
        return Order(
            id=None,
            username=username,
            products=snapshot,
            total_price=Order.sum_prices(snapshot),
        )

    # --- Computed values ------------------------------------------------------

    @staticmethod
    def sum_prices(products: list[Product]) -> Money:
        """Add up unit prices; a non-numeric price fails the whole order."""
        total = Money.zero()
        for product in products:
            total = total + product.unit_price()
        return total
