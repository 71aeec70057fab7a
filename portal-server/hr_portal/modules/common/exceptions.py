"""Error kinds shared by every portal module."""


class PortalError(Exception):
    """Base class for portal domain errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message or self.__class__.__doc__ or ""

    def __str__(self) -> str:
        return self.message


class ValidationError(PortalError):
    """Raised when a field is missing, too short or malformed."""


class ConflictError(PortalError):
    """Raised when a unique key is already taken."""


class DanglingReferenceError(PortalError):
    """Raised when a referenced account or department cannot be resolved."""


class NotFoundError(PortalError):
    """Raised when the operation target no longer exists."""


class StorageError(PortalError):
    """Raised when the persistence slot cannot be read or written."""


class AuthenticationError(PortalError):
    """Raised when credentials do not match a verified account."""


class AuthenticationRequiredError(PortalError):
    """Raised when an operation needs a logged-in identity."""


class PermissionDeniedError(PortalError):
    """Raised when the current identity may not perform an operation."""
