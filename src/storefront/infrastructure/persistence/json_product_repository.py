"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import logging

from storefront.config import PRODUCTS_COLLECTION
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_record_store import JsonRecordStore

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonRecordStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        products = []
        for raw in self._store.load(PRODUCTS_COLLECTION):
            product = self.to_domain(raw)
            if product is not None:
                products.append(product)
        return products

    def upsert(self, product: Product) -> None:
        def replace_or_append(records: list[dict]) -> list[dict]:
            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(records):
                if isinstance(raw, dict) and _same_id(raw.get("id"), product.id):
                    records[i] = self.to_raw(product)
                    return records
            records.append(self.to_raw(product))
            return records

        self._store.update(PRODUCTS_COLLECTION, replace_or_append)

    # --- Serialization --------------------------------------------------------
    # Public so the order repository can reuse them for product snapshots.

    @staticmethod
    def to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": product.price,
            "category": product.category,
        }

    @staticmethod
    def to_domain(raw: object) -> Product | None:
        if not isinstance(raw, dict):
            logger.warning("Skipping product record that is not an object: %r", raw)
            return None
        try:
            return Product.create(
                raw.get("id"), raw.get("name"), raw.get("price"), raw.get("category", "")
            )
        except ValidationError as exc:
            logger.warning("Skipping malformed product record %r: %s", raw.get("id"), exc)
            return None


def _same_id(stored: object, wanted: object) -> bool:
    """Strict id equality: the string "1" never matches the number 1."""
    return type(stored) is type(wanted) and stored == wanted
