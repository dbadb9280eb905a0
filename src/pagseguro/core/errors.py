"""Error taxonomy of the library.

Four kinds, all rooted at `PagSeguroError`:

- `RequestValidationError`: a request object is incomplete or malformed.
  Raised by factories and converters, always before any I/O.
- `TransportError`: the HTTP exchange failed (network, non-2xx status without
  a business error body). Raised by the resources.
- `DecodeError`: the response body is not valid XML or lacks required elements.
- `ServiceError`: the service answered with an `<errors>` document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


class PagSeguroError(Exception):
    """Base class for every error raised by the library."""

    @property
    def cause(self) -> BaseException | None:
        """The lower-level exception this error wraps, if any."""

        return self.__cause__


class RequestValidationError(PagSeguroError, ValueError):
    """A request object is missing a mandated field or breaks a constraint."""

    def __init__(self, field: str, message: str, *, errors: Sequence[dict[str, Any]] = ()) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.errors = list(errors)

    @classmethod
    def missing(cls, field: str) -> "RequestValidationError":
        return cls(field, "field is required")


class TransportError(PagSeguroError):
    """The request could not be completed at the HTTP level."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(PagSeguroError):
    """The response could not be understood."""

    def __init__(self, message: str, *, payload: bytes | str | None = None) -> None:
        super().__init__(message)
        self.payload = _excerpt(payload)


@dataclass(frozen=True)
class ServiceErrorEntry:
    """One `<error>` element of a service error document."""

    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ServiceError(PagSeguroError):
    """The service rejected the request.

    Carries every `(code, message)` pair of the error document, in document
    order, so callers can branch on specific codes.
    """

    def __init__(self, errors: Sequence[ServiceErrorEntry], *, status_code: int | None = None) -> None:
        self.errors = tuple(errors)
        self.status_code = status_code
        summary = "; ".join(str(entry) for entry in self.errors) or "empty error document"
        super().__init__(summary)

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(entry.code for entry in self.errors)

    def has_code(self, code: str | int) -> bool:
        return str(code) in self.codes


def _excerpt(payload: bytes | str | None, limit: int = 500) -> str | None:
    if payload is None:
        return None
    if isinstance(payload, bytes):
        payload = payload.decode("latin-1", errors="replace")
    return payload[:limit]
