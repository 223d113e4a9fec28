"""Session and authorization guard.

A caller is either Anonymous or Authenticated. The state travels in an
explicit ``RequestContext`` handed to every operation; the guard turns a
session id into a context, moves contexts between the two states, and
enforces the two access predicates:

- ``require_authenticated`` sends Anonymous callers to the login page
  (``AuthenticationRequiredError`` carries the redirect target).
- ``require_role`` denies callers without the role, Anonymous included
  (``AccessDeniedError``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.application.authenticate_user import AuthenticateUserHandler
from storefront.config import LOGIN_PATH
from storefront.domain.exceptions import (
    AccessDeniedError,
    AuthenticationRequiredError,
    SessionError,
)
from storefront.domain.model.user import Identity, Role
from storefront.domain.repository.session_store import SessionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Per-request view of the caller's session."""

    session_id: str | None = None
    identity: Identity | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @staticmethod
    def anonymous() -> RequestContext:
        return RequestContext()


class SessionGuard:

    def __init__(
        self,
        sessions: SessionStore,
        authenticator: AuthenticateUserHandler,
        login_path: str = LOGIN_PATH,
    ) -> None:
        self._sessions = sessions
        self._authenticator = authenticator
        self._login_path = login_path

    # --- State transitions ----------------------------------------------------

    def context_for(self, session_id: str | None) -> RequestContext:
        """Resolve *session_id* to a context; unknown ids are Anonymous."""
        if not session_id:
            return RequestContext.anonymous()
        identity = self._sessions.get(session_id)
        if identity is None:
            return RequestContext.anonymous()
        return RequestContext(session_id=session_id, identity=identity)

    def login(self, context: RequestContext, username: str, password: str) -> RequestContext:
        """Anonymous -> Authenticated.

        Any session already held by *context* is dropped and a fresh id is
        issued. Raises InvalidCredentialsError and leaves the existing
        session untouched if authentication fails.
        """
        identity = self._authenticator.handle(username, password)
        if context.session_id is not None:
            self._sessions.destroy(context.session_id)
        session_id = self._sessions.create(identity)
        logger.info("User %r logged in", identity.username)
        return RequestContext(session_id=session_id, identity=identity)

    def logout(self, context: RequestContext) -> RequestContext:
        """Authenticated -> Anonymous.

        The stored session is gone before this returns. Logging out an
        Anonymous context does nothing. Raises SessionError if the store
        fails to drop the session.
        """
        if context.session_id is None:
            return RequestContext.anonymous()
        try:
            self._sessions.destroy(context.session_id)
        except SessionError:
            raise
        except Exception as exc:
            raise SessionError("Could not log out.") from exc
        if context.identity is not None:
            logger.info("User %r logged out", context.identity.username)
        return RequestContext.anonymous()

    # --- Access predicates ----------------------------------------------------

    def require_authenticated(self, context: RequestContext) -> Identity:
        if context.identity is None:
            raise AuthenticationRequiredError(redirect_to=self._login_path)
        return context.identity

    def require_role(self, context: RequestContext, role: Role) -> Identity:
        if context.identity is None or context.identity.role is not role:
            raise AccessDeniedError("Access denied")
        return context.identity
