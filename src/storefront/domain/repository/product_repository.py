"""Abstract repository for the Product aggregate (the catalog)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in stored order."""

    @abstractmethod
    def upsert(self, product: Product) -> None:
        """Replace the product with an equal id, or append it."""
