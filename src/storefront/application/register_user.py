"""Application service: Register User use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import (
    DuplicateUsernameError,
    PasswordMismatchError,
    ValidationError,
)
from storefront.domain.model.user import Identity, Role, User
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(
        self,
        username: str,
        password: str,
        confirm_password: str,
        role: str | Role | None = Role.CUSTOMER,
    ) -> Identity:
        """Register a new account.

        The duplicate check runs before the password comparison, so a
        taken username is reported even when the passwords differ.
        """
        if not isinstance(username, str) or not username:
            raise ValidationError("Username is required")
        if not isinstance(password, str):
            raise ValidationError("Password must be a string")

        if self._user_repo.get_by_username(username) is not None:
            raise DuplicateUsernameError("Username already taken")

        if password != confirm_password:
            raise PasswordMismatchError("Passwords do not match")

        resolved_role = Role.parse(role)
        user = User.register(username, self._hasher.hash(password), resolved_role)
        # add() re-checks uniqueness under the collection lock
        self._user_repo.add(user)

        logger.info("Registered user %r with role %s", user.username, user.role.value)
        return user.identity()
