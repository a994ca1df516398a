"""Error taxonomy for email template management.

A single exception type carries an ``ErrorKind`` so callers can branch on the
kind of failure (prompt for creation on NOT_FOUND, alert on SERVER) without
catching a hierarchy of subclasses.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kinds of failure raised by the template manager."""

    CLIENT = "client_error"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    SERVER = "server_error"

    @property
    def http_status(self) -> int:
        """HTTP-equivalent status code for this kind."""
        return _HTTP_STATUS[self]

    @property
    def is_client_error(self) -> bool:
        """True for kinds caused by caller input rather than a server fault."""
        return self.http_status < 500


_HTTP_STATUS = {
    ErrorKind.CLIENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.SERVER: 500,
}


class EmailTemplateError(Exception):
    """Raised when an email template operation fails.

    Attributes:
        kind: What went wrong.
        message: Human-readable description.
        cause: The underlying exception, if any (also chained as __cause__).
    """

    def __init__(self, kind: ErrorKind, message: str, cause: BaseException | None = None) -> None:
        self.kind = kind
        self.message = message
        self.cause = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"EmailTemplateError(kind={self.kind.value!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and error responses."""
        data: dict[str, Any] = {
            "error": self.kind.value,
            "status": self.kind.http_status,
            "message": self.message,
        }
        if self.cause is not None:
            data["cause"] = str(self.cause)
        return data

    @classmethod
    def client(cls, message: str) -> "EmailTemplateError":
        return cls(ErrorKind.CLIENT, message)

    @classmethod
    def already_exists(cls, message: str) -> "EmailTemplateError":
        return cls(ErrorKind.ALREADY_EXISTS, message)

    @classmethod
    def not_found(cls, message: str) -> "EmailTemplateError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def server(cls, message: str, cause: BaseException | None = None) -> "EmailTemplateError":
        return cls(ErrorKind.SERVER, message, cause)


class TemplateResourceError(ValueError):
    """Raised when a stored resource cannot be read back as an email template."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read email template at '{path}': {reason}")
