"""Abstract repository for the User aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Return a user by exact username, or None if not found."""

    @abstractmethod
    def add(self, user: User) -> None:
        """Append a new user.

        Raises DuplicateUsernameError if the username is already taken.
        """
