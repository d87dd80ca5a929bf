"""
Domain errors raised by the service layer.

``ServiceError`` is the only exception type that leaves
``UserService``.  Its ``status_code`` doubles as the HTTP status the
API returns, so endpoints never have to translate it themselves.
"""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class ServiceError(Exception):
    """Failure of a service operation.

    Parameters
    ----------
    status_code : int
        HTTP-like status code (404 or 500 in practice).
    message : str
        Human readable message returned to API clients.
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    @property
    def kind(self) -> ErrorKind:
        if self.status_code == 404:
            return ErrorKind.NOT_FOUND
        return ErrorKind.INTERNAL

    @classmethod
    def not_found(cls, message: str) -> "ServiceError":
        return cls(404, message)

    @classmethod
    def internal(cls, message: str) -> "ServiceError":
        return cls(500, message)

    def __repr__(self) -> str:
        return f"ServiceError(status_code={self.status_code!r}, message={self.message!r})"
