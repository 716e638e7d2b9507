"""Map raw request failures onto the closed :class:`ErrorKind` taxonomy.

:func:`classify` is a pure function over the failure's shape: no I/O,
no logging, and it never raises.  Rules are evaluated top to bottom and
the first match wins.

Only the first entry of a multi-error GraphQL payload is inspected; a
response carrying several descriptors of different kinds surfaces the
first one.
"""

from __future__ import annotations

from typing import Any

from ffcli.exceptions import ErrorKind, FirefliesApiError, ProtocolError

MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NO_API_KEY: "No API key found. Run `ffcli auth` or set FIREFLIES_API_KEY.",
    ErrorKind.NETWORK_ERROR: "Could not connect to Fireflies API. Check your internet connection.",
    ErrorKind.AUTH_FAILED: "Invalid API key. Run `ffcli auth` to reconfigure.",
    ErrorKind.TOO_MANY_REQUESTS: "Rate limited. Try again later.",
    ErrorKind.OBJECT_NOT_FOUND: "Meeting not found. Check the ID with `ffcli list`.",
    ErrorKind.PAID_REQUIRED: "This feature requires a paid Fireflies plan.",
    ErrorKind.FORBIDDEN: "You don't have permission to access this resource.",
    ErrorKind.NOT_IN_TEAM: "That user is not in your team.",
    ErrorKind.REQUIRE_ELEVATED_PRIVILEGE: "This action requires admin privileges.",
}

# Connection-level failures, as spelled by Node, urllib3 and the OS resolver.
_NETWORK_MARKERS: tuple[str, ...] = (
    "ENOTFOUND",
    "ECONNREFUSED",
    "fetch failed",
    "Name or service not known",
    "nodename nor servname provided",
    "Temporary failure in name resolution",
    "Failed to resolve",
    "getaddrinfo failed",
    "Connection refused",
    "Failed to establish a new connection",
)

# Only checked for failures without a GraphQL payload.
_TRANSPORT_ONLY_MARKERS: tuple[str, ...] = ("timed out",)

# Ordered (markers, kind) table matched against the first GraphQL error message.
_PROTOCOL_RULES: tuple[tuple[tuple[str, ...], ErrorKind], ...] = (
    (("auth_failed", "Unauthorized"), ErrorKind.AUTH_FAILED),
    (("too_many_requests",), ErrorKind.TOO_MANY_REQUESTS),
    (("object_not_found", "not found"), ErrorKind.OBJECT_NOT_FOUND),
    (("paid_required",), ErrorKind.PAID_REQUIRED),
    (("forbidden",), ErrorKind.FORBIDDEN),
    (("not_in_team",), ErrorKind.NOT_IN_TEAM),
    (("require_elevated_privilege",), ErrorKind.REQUIRE_ELEVATED_PRIVILEGE),
)


def make_error(kind: ErrorKind) -> FirefliesApiError:
    """Build a :class:`FirefliesApiError` carrying the static message for *kind*."""
    return FirefliesApiError(kind, MESSAGES.get(kind, kind.value))


def first_error_message(errors: list[dict[str, Any]]) -> str:
    if not errors:
        return ""
    message = errors[0].get("message")
    return message if isinstance(message, str) else ""


def classify(failure: BaseException) -> FirefliesApiError:
    """Return the classified form of *failure*.

    Idempotent: a :class:`FirefliesApiError` is returned unchanged.
    Anything unrecognised becomes ``unknown`` with the failure's own
    text as the message.
    """
    if isinstance(failure, FirefliesApiError):
        return failure

    text = str(failure)

    network_markers = _NETWORK_MARKERS
    if not isinstance(failure, ProtocolError):
        network_markers += _TRANSPORT_ONLY_MARKERS
    if any(marker in text for marker in network_markers):
        return make_error(ErrorKind.NETWORK_ERROR)

    if isinstance(failure, ProtocolError):
        message = first_error_message(failure.errors)
        for rule_markers, kind in _PROTOCOL_RULES:
            if any(marker in message for marker in rule_markers):
                return make_error(kind)

    return FirefliesApiError(ErrorKind.UNKNOWN, text)
