"""Custom exception hierarchy for ffcli.

All exceptions that reach the CLI error boundary must inherit from
:class:`FfcliError`.  Raw transport failures are modelled by
:class:`TransportError` and :class:`ProtocolError`; they are raised by
the infrastructure layer and must NEVER propagate beyond the request
executor — it classifies them into a :class:`FirefliesApiError`.

Hierarchy
---------
FfcliError
├── FirefliesApiError   (carries an :class:`ErrorKind`)
└── InvalidOptionError

Exception (raw, internal)
├── TransportError
└── ProtocolError
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class FfcliError(Exception):
    """Base exception for all ffcli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

    @property
    def message(self) -> str:
        return str(self)


# --- Remote API -------------------------------------------------------------

class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced by the request executor."""

    NO_API_KEY = "no_api_key"
    NETWORK_ERROR = "network_error"
    AUTH_FAILED = "auth_failed"
    TOO_MANY_REQUESTS = "too_many_requests"
    OBJECT_NOT_FOUND = "object_not_found"
    PAID_REQUIRED = "paid_required"
    FORBIDDEN = "forbidden"
    NOT_IN_TEAM = "not_in_team"
    REQUIRE_ELEVATED_PRIVILEGE = "require_elevated_privilege"
    UNKNOWN = "unknown"


class FirefliesApiError(FfcliError):
    """A classified failure of a Fireflies API request."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.kind: ErrorKind = kind

    def __repr__(self) -> str:
        return f"FirefliesApiError(kind={self.kind.value!r}, message={self.message!r})"


# --- User input -------------------------------------------------------------

class InvalidOptionError(FfcliError):
    """Raised when a command-line option or setting has an invalid value."""


# --- Raw failures (never user-visible) --------------------------------------

class TransportError(Exception):
    """The HTTP exchange itself failed (DNS, refused connection, timeout...)."""


class ProtocolError(Exception):
    """The API answered with a structured GraphQL error payload."""

    def __init__(
        self,
        errors: list[dict[str, Any]],
        *,
        status: int | None = None,
    ) -> None:
        first = errors[0].get("message", "") if errors else ""
        prefix = "GraphQL Error" if status is None else f"GraphQL Error (Code: {status})"
        super().__init__(f"{prefix}: {first}")
        self.errors: list[dict[str, Any]] = errors
        self.status: int | None = status
