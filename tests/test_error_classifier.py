"""Tests for the error classifier (core/error_classifier.py).

``classify`` is pure, so every test feeds a raw failure object and
inspects the returned :class:`FirefliesApiError`.
"""

from __future__ import annotations

import pytest

from ffcli.core.error_classifier import MESSAGES, classify, make_error
from ffcli.exceptions import ErrorKind, FirefliesApiError, ProtocolError, TransportError


def _gql(*messages: str) -> ProtocolError:
    return ProtocolError([{"message": m} for m in messages], status=200)


# ---------------------------------------------------------------------------
# Pass-through
# ---------------------------------------------------------------------------

class TestIdempotence:
    def test_classified_error_returned_unchanged(self) -> None:
        original = make_error(ErrorKind.FORBIDDEN)
        assert classify(original) is original

    def test_reclassifying_output_is_stable(self) -> None:
        first = classify(_gql("too_many_requests"))
        assert classify(first) is first

    def test_unknown_passes_through_with_custom_message(self) -> None:
        original = FirefliesApiError(ErrorKind.UNKNOWN, "something odd")
        assert classify(original).message == "something odd"


# ---------------------------------------------------------------------------
# Network failures
# ---------------------------------------------------------------------------

class TestNetworkErrors:
    @pytest.mark.parametrize(
        "text",
        [
            "getaddrinfo ENOTFOUND api.fireflies.ai",
            "connect ECONNREFUSED 127.0.0.1:443",
            "fetch failed",
            "[Errno -2] Name or service not known",
            "Failed to resolve 'api.fireflies.ai'",
            "[Errno 111] Connection refused",
            "Request timed out after 30s",
        ],
    )
    def test_markers_map_to_network_error(self, text: str) -> None:
        err = classify(TransportError(text))
        assert err.kind is ErrorKind.NETWORK_ERROR
        assert err.message == MESSAGES[ErrorKind.NETWORK_ERROR]

    def test_marker_in_plain_exception(self) -> None:
        assert classify(OSError("ECONNREFUSED")).kind is ErrorKind.NETWORK_ERROR

    @pytest.mark.parametrize(
        "message",
        [
            "fetch failed: ECONNREFUSED upstream",
            "getaddrinfo ENOTFOUND internal-gateway",
        ],
    )
    def test_markers_in_graphql_message(self, message: str) -> None:
        err = classify(_gql(message))
        assert err.kind is ErrorKind.NETWORK_ERROR
        assert err.message == MESSAGES[ErrorKind.NETWORK_ERROR]

    def test_network_marker_wins_over_protocol_rule(self) -> None:
        assert classify(_gql("forbidden: ECONNREFUSED")).kind is ErrorKind.NETWORK_ERROR

    def test_timed_out_in_graphql_message_is_not_network(self) -> None:
        err = classify(_gql("Export timed out, try a shorter range"))
        assert err.kind is ErrorKind.UNKNOWN


# ---------------------------------------------------------------------------
# GraphQL payloads
# ---------------------------------------------------------------------------

class TestProtocolErrors:
    @pytest.mark.parametrize(
        ("message", "kind"),
        [
            ("auth_failed", ErrorKind.AUTH_FAILED),
            ("Unauthorized", ErrorKind.AUTH_FAILED),
            ("too_many_requests", ErrorKind.TOO_MANY_REQUESTS),
            ("object_not_found", ErrorKind.OBJECT_NOT_FOUND),
            ("Transcript not found", ErrorKind.OBJECT_NOT_FOUND),
            ("paid_required", ErrorKind.PAID_REQUIRED),
            ("forbidden", ErrorKind.FORBIDDEN),
            ("not_in_team", ErrorKind.NOT_IN_TEAM),
            ("require_elevated_privilege", ErrorKind.REQUIRE_ELEVATED_PRIVILEGE),
        ],
    )
    def test_known_messages(self, message: str, kind: ErrorKind) -> None:
        err = classify(_gql(message))
        assert err.kind is kind
        assert err.message == MESSAGES[kind]

    def test_object_not_found_message(self) -> None:
        err = classify(_gql("object_not_found"))
        assert "Meeting not found" in err.message

    def test_rule_order_auth_before_rate_limit(self) -> None:
        err = classify(_gql("auth_failed: too_many_requests"))
        assert err.kind is ErrorKind.AUTH_FAILED

    def test_only_first_error_is_inspected(self) -> None:
        err = classify(_gql("paid_required", "forbidden"))
        assert err.kind is ErrorKind.PAID_REQUIRED

    def test_later_errors_ignored_when_first_unknown(self) -> None:
        err = classify(_gql("weird", "forbidden"))
        assert err.kind is ErrorKind.UNKNOWN

    def test_empty_errors_list_is_unknown(self) -> None:
        assert classify(ProtocolError([])).kind is ErrorKind.UNKNOWN

    def test_non_string_message_is_unknown(self) -> None:
        err = classify(ProtocolError([{"message": 42}]))
        assert err.kind is ErrorKind.UNKNOWN


# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------

class TestUnknown:
    def test_message_is_raw_text(self) -> None:
        err = classify(RuntimeError("boom"))
        assert err.kind is ErrorKind.UNKNOWN
        assert err.message == "boom"

    def test_unmatched_graphql_message_kept(self) -> None:
        err = classify(_gql("Internal server error"))
        assert err.kind is ErrorKind.UNKNOWN
        assert "Internal server error" in err.message

    def test_classify_never_raises_on_odd_input(self) -> None:
        assert classify(ValueError()).kind is ErrorKind.UNKNOWN
