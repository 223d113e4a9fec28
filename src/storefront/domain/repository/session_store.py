"""Abstract store for login sessions.

Sessions are process-held only; implementations must not persist them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import Identity


class SessionStore(ABC):

    @abstractmethod
    def create(self, identity: Identity) -> str:
        """Bind *identity* to a fresh session id and return the id."""

    @abstractmethod
    def get(self, session_id: str) -> Identity | None:
        """Return the identity bound to *session_id*, or None."""

    @abstractmethod
    def destroy(self, session_id: str) -> None:
        """Forget *session_id*. Unknown ids are ignored.

        Raises SessionError if the session could not be removed.
        """
