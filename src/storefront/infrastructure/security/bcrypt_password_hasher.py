"""bcrypt implementation of the PasswordHasher domain service."""

from __future__ import annotations

import logging

import bcrypt

from storefront.config import BCRYPT_ROUNDS
from storefront.domain.service.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input
_BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, credential_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), credential_hash.encode("utf-8"))
        except ValueError as exc:
            logger.error("Password verification error: %s", exc)
            return False


def _encode(password: str) -> bytes:
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > _BCRYPT_MAX_BYTES:
        logger.warning(
            "Password exceeds %d bytes (%d bytes), truncating",
            _BCRYPT_MAX_BYTES,
            len(password_bytes),
        )
        password_bytes = password_bytes[:_BCRYPT_MAX_BYTES]
    return password_bytes
