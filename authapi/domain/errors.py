"""
Domain error taxonomy.

Every recognized failure is a DomainError tagged with one ErrorKind.
The HTTP status is fixed per kind and looked up, never passed by callers.
These are mapped to HTTP responses at the shared error boundary.
No framework imports allowed.
"""

from enum import Enum

DEFAULT_MESSAGE = "Something went wrong"
INTERNAL_SERVER_ERROR_MESSAGE = "Internal Server Error"
FALLBACK_STATUS = 500


class ErrorKind(str, Enum):
    """Closed set of failure kinds exposed as the ``type`` of error bodies."""

    BAD_REQUEST = "BadRequest"
    NOT_FOUND = "NotFound"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    TOKEN_EXPIRED = "TokenExpired"
    BAD_TOKEN = "BadToken"
    ACCESS_TOKEN_ERROR = "AccessTokenError"
    VALIDATION_ERROR = "ValidationError"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.VALIDATION_ERROR: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.TOKEN_EXPIRED: 401,
    ErrorKind.BAD_TOKEN: 401,
    ErrorKind.ACCESS_TOKEN_ERROR: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL_SERVER_ERROR: 500,
}


def status_for(kind: ErrorKind) -> int:
    """Return the HTTP status for a kind, 500 when the kind is unknown."""
    return STATUS_BY_KIND.get(kind, FALLBACK_STATUS)


def kind_for_status(status_code: int) -> ErrorKind:
    """Pick the kind that best describes a raw HTTP status code.

    Used to fold framework-level HTTP errors into the taxonomy.
    """
    if status_code == 401:
        return ErrorKind.UNAUTHORIZED
    if status_code == 403:
        return ErrorKind.FORBIDDEN
    if status_code == 404:
        return ErrorKind.NOT_FOUND
    if 400 <= status_code < 500:
        return ErrorKind.BAD_REQUEST
    return ErrorKind.INTERNAL_SERVER_ERROR


class DomainError(Exception):
    """A recognized failure carrying a kind, its HTTP status and a message.

    Kind and message are exposed read-only; the status is derived from the kind.
    """

    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        super().__init__(message)
        self._kind = ErrorKind(kind)
        self._message = message

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def http_status(self) -> int:
        return status_for(self._kind)

    def __repr__(self) -> str:
        return f"DomainError({self._kind.value!r}, {self._message!r})"

    # Convenience constructors, one per kind used by request handling code.

    @classmethod
    def bad_request(cls, message: str = "Bad Request") -> "DomainError":
        return cls(ErrorKind.BAD_REQUEST, message)

    @classmethod
    def not_found(cls, message: str = "Not Found") -> "DomainError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized") -> "DomainError":
        return cls(ErrorKind.UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: str = "Forbidden") -> "DomainError":
        return cls(ErrorKind.FORBIDDEN, message)

    @classmethod
    def internal(
        cls, message: str = INTERNAL_SERVER_ERROR_MESSAGE
    ) -> "DomainError":
        return cls(ErrorKind.INTERNAL_SERVER_ERROR, message)

    @classmethod
    def validation(cls, messages: list[str]) -> "DomainError":
        """Build a ValidationError whose message joins every issue in order."""
        return cls(ErrorKind.VALIDATION_ERROR, ", ".join(messages))
