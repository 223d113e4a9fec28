"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

import logging

from storefront.config import USERS_COLLECTION
from storefront.domain.exceptions import DuplicateUsernameError, ValidationError
from storefront.domain.model.user import Role, User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_record_store import JsonRecordStore

logger = logging.getLogger(__name__)


class JsonUserRepository(UserRepository):

    def __init__(self, store: JsonRecordStore) -> None:
        self._store = store

    # --- UserRepository interface ---------------------------------------------

    def get_by_username(self, username: str) -> User | None:
        for raw in self._store.load(USERS_COLLECTION):
            if isinstance(raw, dict) and raw.get("username") == username:
                return self._to_domain(raw)
        return None

    def add(self, user: User) -> None:
        def append(records: list[dict]) -> list[dict]:
            if any(isinstance(r, dict) and r.get("username") == user.username for r in records):
                raise DuplicateUsernameError("Username already taken")
            records.append(self._to_raw(user))
            return records

        self._store.update(USERS_COLLECTION, append)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "username": user.username,
            "password_hash": user.credential_hash,
            "role": user.role.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User | None:
        # Files written by earlier versions keep the hash under "password".
        credential_hash = raw.get("password_hash", raw.get("password"))
        try:
            if not isinstance(credential_hash, str):
                raise ValidationError("missing credential hash")
            return User(
                username=raw["username"],
                credential_hash=credential_hash,
                role=Role.parse(raw.get("role")),
            )
        except (KeyError, ValidationError) as exc:
            logger.warning("Skipping malformed user record %r: %s", raw.get("username"), exc)
            return None
