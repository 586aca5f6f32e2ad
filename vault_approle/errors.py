"""
AppRole client errors.

Every failure surfaced by this package derives from AppRoleError. Nothing is
retried internally; retry policy belongs to the caller.
"""

from typing import Any, List, Optional


class AppRoleError(Exception):
    """Base class for all AppRole client errors."""


class InvalidInputError(AppRoleError, ValueError):
    """Local validation failed. No request was issued."""


class EncodingFailedError(AppRoleError):
    """Role options could not be serialized into a request body."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class OperationError(AppRoleError):
    """
    A registry operation failed against the service.

    Attributes:
        operation: Name of the failing operation ("list", "write")
        path: Target request path
        cause: The underlying error, also available as __cause__
    """

    operation: str = ""

    def __init__(self, message: str, path: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause


class ListFailedError(OperationError):
    """Listing roles failed: transport error, non-2xx status or malformed body."""

    operation = "list"


class WriteFailedError(OperationError):
    """Creating or updating a role failed."""

    operation = "write"


class TransportError(AppRoleError):
    """
    The HTTP transport could not complete a request.

    Raised for connection failures and for non-2xx responses. Vault's
    ``errors`` array is kept when the response carried one.
    """

    def __init__(
        self,
        message: str,
        method: str,
        path: str,
        status_code: Optional[int] = None,
        errors: Optional[List[Any]] = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.path = path
        self.status_code = status_code
        self.errors = errors or []
