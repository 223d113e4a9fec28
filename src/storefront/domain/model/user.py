"""User aggregate and the Identity it hands out once authenticated."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError


class Role(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"

    @staticmethod
    def parse(value: str | Role | None) -> Role:
        """Resolve a role name; ``None`` means the default customer role."""
        if value is None:
            return Role.CUSTOMER
        if isinstance(value, Role):
            return value
        try:
            return Role(value)
        except ValueError as exc:
            raise ValidationError(f"Unknown role: {value!r}") from exc


@dataclass(frozen=True)
class Identity:
    """Who is calling: the username and role of an authenticated user."""

    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass
class User:
    """A registered account.

    Only the bcrypt hash of the password is ever held. Users are never
    deleted and nothing in the system changes them after registration.
    """

    username: str
    credential_hash: str
    role: Role = Role.CUSTOMER

    @staticmethod
    def register(username: str, credential_hash: str, role: Role) -> User:
        if not isinstance(username, str) or not username:
            raise ValidationError("Username is required")
        return User(username=username, credential_hash=credential_hash, role=role)

    def identity(self) -> Identity:
        return Identity(username=self.username, role=self.role)
