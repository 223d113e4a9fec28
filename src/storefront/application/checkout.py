"""Application service: Checkout use case.

Orchestrates the catalog lookup and the creation of an Order for the
authenticated caller. There is no stock to reserve and no idempotency
key: calling it twice places two orders.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from storefront.application.dto import ReceiptDTO
from storefront.domain.exceptions import NoValidProductsError
from storefront.domain.model.order import Order
from storefront.domain.model.user import Identity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, identity: Identity, requested_ids: object) -> ReceiptDTO:
        """Place an order for the requested products.

        Steps:
        1. Load the full catalog.
        2. Keep products whose id, as a string, was requested. Requested
           ids are matched as strings only, so a numeric ``1`` in the
           request never matches.
        3. Reject the request if nothing matched.
        4. Snapshot the products and sum their prices.
        5. Persist the order and return a receipt.
        """
        requested = _as_id_list(requested_ids)
        selected = [p for p in self._product_repo.list_all() if p.matches_any(requested)]
        if not selected:
            raise NoValidProductsError("Invalid products selected.")

        order = Order.place(username=identity.username, products=selected)
        self._order_repo.add(order)

        logger.info(
            "Order #%s placed by %r for %s", order.id, identity.username, order.total_price
        )
        return ReceiptDTO(
            order_id=order.id,  # type: ignore[arg-type]
            username=order.username,
            item_count=len(order.products),
            total=str(order.total_price),
        )


def _as_id_list(requested_ids: object) -> list:
    """A malformed request (not a list of ids) selects nothing."""
    if isinstance(requested_ids, (str, bytes)) or not isinstance(requested_ids, Sequence):
        return []
    return list(requested_ids)
