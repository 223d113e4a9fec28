"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation

from storefront.config import ORDERS_COLLECTION
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_record_store import JsonRecordStore

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, store: JsonRecordStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        def append(records: list[dict]) -> list[dict]:
            order.id = self._next_id(records)
            records.append(self._to_raw(order))
            return records

        self._store.update(ORDERS_COLLECTION, append)

    def list_all(self) -> list[Order]:
        orders = []
        for raw in self._store.load(ORDERS_COLLECTION):
            order = self._to_domain(raw)
            if order is not None:
                orders.append(order)
        return orders

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _next_id(records: list[dict]) -> int:
        ids = [
            r["id"] for r in records
            if isinstance(r, dict) and isinstance(r.get("id"), int)
        ]
        return max(ids, default=0) + 1

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "username": order.username,
            "products": [JsonProductRepository.to_raw(p) for p in order.products],
            "total_price": str(order.total_price.amount),
            "created_at": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: object) -> Order | None:
        if not isinstance(raw, dict):
            logger.warning("Skipping order record that is not an object: %r", raw)
            return None
        try:
            products = []
            for item in raw.get("products", []):
                product = JsonProductRepository.to_domain(item)
                if product is None:
                    raise ValidationError("order contains a malformed product")
                products.append(product)
            # Legacy orders store camelCase "totalPrice" and no id/timestamp.
            total = raw.get("total_price", raw.get("totalPrice"))
            created_at = raw.get("created_at")
            order = Order(
                id=raw.get("id"),
                username=raw["username"],
                products=products,
                total_price=Money(Decimal(str(total))),
            )
            if created_at:
                order.created_at = datetime.fromisoformat(created_at)
            return order
        except (KeyError, TypeError, ValueError, InvalidOperation, ValidationError) as exc:
            logger.warning("Skipping malformed order record %r: %s", raw.get("id"), exc)
            return None
