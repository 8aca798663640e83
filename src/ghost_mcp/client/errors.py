"""Error handling for the Ghost API clients.

Every remote or transport failure leaves the clients as a ``GhostApiError``.
A ``status_code`` of ``0`` means no HTTP response was received.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_TOO_MANY_REQUESTS = 429
HTTP_NO_CONTENT = 204

NETWORK_ERROR = "NetworkError"
TIMEOUT_ERROR = "TimeoutError"
UNKNOWN_ERROR = "UnknownError"


class ErrorDetail(BaseModel):
    """One entry of the ``errors`` array in a Ghost error response."""

    model_config = ConfigDict(extra="allow")

    message: str | None = None
    type: str | None = None
    code: Any = None
    context: Any = None
    property: Any = None

    @field_validator("message", "type", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class ErrorEnvelope(BaseModel):
    """Ghost error response body."""

    errors: list[ErrorDetail] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def _keep_object_entries(cls, value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        return [entry for entry in value if isinstance(entry, dict)]


class GhostApiError(Exception):
    """Raised when a Ghost API request fails."""

    def __init__(self, message: str, status_code: int, errors: list[ErrorDetail] | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable message.
            status_code: HTTP status code, or ``0`` when no response was received.
            errors: Error entries reported by Ghost, in order.

        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors: list[ErrorDetail] = list(errors or [])
        primary = self.errors[0] if self.errors else None
        self.type: str | None = primary.type if primary else None
        self.code: Any = primary.code if primary else None

    @classmethod
    def from_response(cls, status_code: int, errors: list[ErrorDetail]) -> Self:
        """Build an error from a non-success HTTP response."""
        primary_message = errors[0].message if errors else None
        message = primary_message if primary_message is not None else f"Ghost API error (status {status_code})"
        return cls(message, status_code, errors)

    @classmethod
    def network_error(cls, cause: BaseException) -> Self:
        """Build an error for a failure where no response was received."""
        return cls(
            f"Network error: {cause}",
            0,
            [ErrorDetail(message=str(cause), type=NETWORK_ERROR)],
        )

    @classmethod
    def timeout_error(cls, timeout_ms: int) -> Self:
        """Build an error for a request that exceeded its timeout."""
        message = f"Request timed out after {timeout_ms}ms"
        return cls(message, 0, [ErrorDetail(message=message, type=TIMEOUT_ERROR)])

    @classmethod
    def unknown_error(cls, cause: object) -> Self:
        """Build an error for a failure whose cause is not an exception object."""
        return cls(
            "An unknown error occurred",
            0,
            [ErrorDetail(message=str(cause), type=UNKNOWN_ERROR)],
        )

    def is_validation_error(self) -> bool:
        """Return True for request validation failures (400)."""
        return self.status_code == HTTP_BAD_REQUEST or self.type == "ValidationError"

    def is_authentication_error(self) -> bool:
        """Return True for authentication failures (401)."""
        return self.status_code == HTTP_UNAUTHORIZED

    def is_authorization_error(self) -> bool:
        """Return True for permission failures (403)."""
        return self.status_code == HTTP_FORBIDDEN

    def is_not_found_error(self) -> bool:
        """Return True when the resource does not exist (404)."""
        return self.status_code == HTTP_NOT_FOUND or self.type == "NotFoundError"

    def is_rate_limit_error(self) -> bool:
        """Return True when the request was rate limited (429)."""
        return self.status_code == HTTP_TOO_MANY_REQUESTS

    def is_server_error(self) -> bool:
        """Return True for 5xx responses."""
        return 500 <= self.status_code < 600  # noqa: PLR2004

    def is_network_error(self) -> bool:
        """Return True when no response was received."""
        return self.status_code == 0 and self.type == NETWORK_ERROR

    def is_timeout_error(self) -> bool:
        """Return True when the request timed out."""
        return self.status_code == 0 and self.type == TIMEOUT_ERROR

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, type={self.type!r}, message={self.message!r})"


__all__ = [
    "HTTP_NOT_FOUND",
    "HTTP_NO_CONTENT",
    "ErrorDetail",
    "ErrorEnvelope",
    "GhostApiError",
]
