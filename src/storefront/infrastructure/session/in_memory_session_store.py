"""Process-held session store. Sessions vanish when the process exits."""

from __future__ import annotations

import secrets
import threading

from storefront.domain.model.user import Identity
from storefront.domain.repository.session_store import SessionStore


class InMemorySessionStore(SessionStore):

    def __init__(self) -> None:
        self._sessions: dict[str, Identity] = {}
        self._lock = threading.Lock()

    def create(self, identity: Identity) -> str:
        session_id = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[session_id] = identity
        return session_id

    def get(self, session_id: str) -> Identity | None:
        with self._lock:
            return self._sessions.get(session_id)

    def destroy(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
