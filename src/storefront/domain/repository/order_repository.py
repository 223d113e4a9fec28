"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Append a new order, assigning its ID."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""
