"""
Response envelope and error taxonomy for the analysis backend.

Every call made through the RequestExecutor resolves to exactly one of:
- Success(payload): decoded JSON, or raw bytes for the report endpoint
- Failure(ApiError): one of the ApiErrorKind values below

Callers that prefer exceptions use ``unwrap()``, which raises the ApiError.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

TIMEOUT_MESSAGE = "Request timeout - server may be unavailable"
CONNECTION_MESSAGE = "Network error - cannot connect to server"
NETWORK_MESSAGE = "Network error or server unavailable"
MALFORMED_MESSAGE = "Malformed response from server"


class ApiErrorKind(str, Enum):
    TIMEOUT = "timeout"
    CONNECTION = "connection"
    NETWORK = "network"
    HTTP = "http"
    MALFORMED = "malformed"


class ApiError(Exception):
    """Failure of a single backend call. ``status`` is 0 when no response arrived."""

    def __init__(
        self,
        message: str,
        status: int,
        response: Any = None,
        *,
        kind: ApiErrorKind = ApiErrorKind.HTTP,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response
        self.kind = kind

    @classmethod
    def timeout(cls) -> "ApiError":
        return cls(TIMEOUT_MESSAGE, 0, kind=ApiErrorKind.TIMEOUT)

    @classmethod
    def connection(cls) -> "ApiError":
        return cls(CONNECTION_MESSAGE, 0, kind=ApiErrorKind.CONNECTION)

    @classmethod
    def network(cls) -> "ApiError":
        return cls(NETWORK_MESSAGE, 0, kind=ApiErrorKind.NETWORK)

    @classmethod
    def malformed(cls, status: int, response: Any = None) -> "ApiError":
        return cls(MALFORMED_MESSAGE, status, response, kind=ApiErrorKind.MALFORMED)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.status, self.message) == (other.status, other.message)

    def __hash__(self) -> int:
        return hash((self.status, self.message))

    def __repr__(self) -> str:
        return f"ApiError(status={self.status!r}, message={self.message!r}, kind={self.kind.value!r})"


@dataclass(frozen=True)
class Success:
    payload: Any
    status: int = 200

    ok = True

    def unwrap(self) -> Any:
        return self.payload


@dataclass(frozen=True)
class Failure:
    error: ApiError

    ok = False

    def unwrap(self) -> Any:
        raise self.error


ApiResponse = Union[Success, Failure]


def failure_from_status(status: int, reason: str, body: Optional[Any]) -> Failure:
    """Build the server-reported failure for a non-2xx response."""
    parsed = body if body is not None else {}
    message = None
    if isinstance(parsed, dict):
        message = parsed.get("message")
    if not message:
        message = f"HTTP {status}: {reason}"
    return Failure(ApiError(str(message), status, parsed, kind=ApiErrorKind.HTTP))
