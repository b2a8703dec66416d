"""Service-layer failures; the API layer maps each class to an HTTP status."""


class ServiceError(Exception):
    """Base class for expected failures raised by the services."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Input is malformed or a required value is missing."""


class AlreadyExistsError(ValidationError):
    """A user with the same email is already registered."""


class AuthenticationError(ServiceError):
    """Credentials do not match a known user."""


class AuthorizationError(ServiceError):
    """The caller is authenticated but may not act on the resource."""


class NotFoundError(ServiceError):
    """The referenced entity does not exist."""


class InternalError(ServiceError):
    """Unexpected store or filesystem failure."""
