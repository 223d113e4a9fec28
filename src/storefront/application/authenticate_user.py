"""Application service: Authenticate User use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import InvalidCredentialsError
from storefront.domain.model.user import Identity
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class AuthenticateUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(self, username: str, password: str) -> Identity:
        """Return the caller's identity if the credentials check out.

        An unknown username and a wrong password raise the same error.
        """
        user = None
        if isinstance(username, str) and isinstance(password, str):
            user = self._user_repo.get_by_username(username)

        if user is None or not self._hasher.verify(password, user.credential_hash):
            logger.warning("Failed login attempt for %r", username)
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        return user.identity()
