"""Application service: Upsert Product use case."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpsertProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: object,
        name: object,
        price: object,
        category: object,
    ) -> ProductDTO:
        """Add a product, or replace the one with the same id wholesale.

        Only the record shape is checked. Callers must not rely on this
        to sanitize names or categories. Existing orders keep their own
        snapshots and are not affected.
        """
        product = Product.create(product_id, name, price, category)
        self._product_repo.upsert(product)
        logger.info("Saved product %r (%s)", product.id, product.name)
        return ProductDTO.from_product(product)
