"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the API facade and the CLI can catch them uniformly and turn them into
user-facing messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or record schema was violated."""


class DuplicateUsernameError(ValidationError):
    """The requested username is already registered."""


class PasswordMismatchError(ValidationError):
    """Password and its confirmation differ."""


class NoValidProductsError(ValidationError):
    """A checkout request matched no product in the catalog."""


class AuthenticationError(DomainException):
    """Credentials could not be verified."""


class InvalidCredentialsError(AuthenticationError):
    """Unknown username or wrong password.

    Both causes share one message so callers cannot probe for usernames.
    """


class AuthenticationRequiredError(DomainException):
    """The caller has no authenticated session.

    Carries the path the caller should be sent to in order to log in.
    """

    def __init__(self, redirect_to: str) -> None:
        self.redirect_to = redirect_to
        super().__init__(f"Authentication required, redirecting to {redirect_to}")


class AuthorizationError(DomainException):
    """The caller is authenticated but not allowed to do this."""


class AccessDeniedError(AuthorizationError):
    """The caller does not hold the required role."""


class SessionError(DomainException):
    """A session could not be created or destroyed."""


class StorageError(DomainException):
    """Backing storage could not be read or written.

    Raised and absorbed inside the record store; never reaches a caller.
    """
