"""Tests for RequestsTransport (infra/http_transport.py).

``requests.Session`` is replaced by a MagicMock — no sockets are opened.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from ffcli.core.error_classifier import classify
from ffcli.exceptions import ErrorKind, ProtocolError, TransportError
from ffcli.infra.http_transport import RequestsTransport

_URL = "https://example.test/graphql"
_PAYLOAD = {"query": "query { user { name } }", "variables": {}}
_HEADERS = {"Authorization": "Bearer k"}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _response(status: int, body: Any = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.ok = status < 400
    response.text = text
    if body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = body
    return response


def _transport(outcome: MagicMock | Exception) -> tuple[RequestsTransport, MagicMock]:
    session = MagicMock()
    if isinstance(outcome, Exception):
        session.post.side_effect = outcome
    else:
        session.post.return_value = outcome
    return RequestsTransport(session=session), session


def _post(transport: RequestsTransport) -> dict[str, Any]:
    return transport.post(_URL, _PAYLOAD, headers=_HEADERS, timeout=12.0)


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------

class TestSuccess:
    def test_returns_data(self) -> None:
        transport, _ = _transport(_response(200, {"data": {"user": {"name": "Ada"}}}))
        assert _post(transport) == {"user": {"name": "Ada"}}

    def test_request_shape(self) -> None:
        transport, session = _transport(_response(200, {"data": {}}))
        _post(transport)
        session.post.assert_called_once_with(
            _URL, json=_PAYLOAD, headers=_HEADERS, timeout=12.0,
        )

    def test_session_defaults(self) -> None:
        _, session = _transport(_response(200, {"data": {}}))
        defaults = session.headers.update.call_args.args[0]
        assert defaults["Content-Type"] == "application/json"
        assert defaults["User-Agent"].startswith("ffcli/")

    def test_context_manager_closes_session(self) -> None:
        transport, session = _transport(_response(200, {"data": {}}))
        with transport:
            pass
        session.close.assert_called_once()


# ---------------------------------------------------------------------------
# GraphQL errors
# ---------------------------------------------------------------------------

class TestProtocolErrors:
    def test_errors_payload_raises_protocol_error(self) -> None:
        body = {"errors": [{"message": "object_not_found", "code": "object_not_found"}], "data": None}
        transport, _ = _transport(_response(200, body))
        with pytest.raises(ProtocolError) as exc_info:
            _post(transport)
        assert exc_info.value.errors[0]["message"] == "object_not_found"
        assert exc_info.value.status == 200

    def test_errors_on_error_status(self) -> None:
        transport, _ = _transport(_response(400, {"errors": [{"message": "forbidden"}]}))
        with pytest.raises(ProtocolError) as exc_info:
            _post(transport)
        assert classify(exc_info.value).kind is ErrorKind.FORBIDDEN

    def test_bare_429_is_rate_limit(self) -> None:
        transport, _ = _transport(_response(429, text="Too Many Requests"))
        with pytest.raises(ProtocolError) as exc_info:
            _post(transport)
        assert classify(exc_info.value).kind is ErrorKind.TOO_MANY_REQUESTS

    def test_bare_401_is_auth_failure(self) -> None:
        transport, _ = _transport(_response(401, text="Unauthorized"))
        with pytest.raises(ProtocolError) as exc_info:
            _post(transport)
        assert classify(exc_info.value).kind is ErrorKind.AUTH_FAILED


# ---------------------------------------------------------------------------
# Transport failures
# ---------------------------------------------------------------------------

class TestTransportErrors:
    def test_connection_error_is_network_error(self) -> None:
        transport, _ = _transport(requests.exceptions.ConnectionError("Name or service not known"))
        with pytest.raises(TransportError) as exc_info:
            _post(transport)
        assert "fetch failed" in str(exc_info.value)
        assert classify(exc_info.value).kind is ErrorKind.NETWORK_ERROR

    def test_timeout_is_network_error(self) -> None:
        transport, _ = _transport(requests.exceptions.ReadTimeout("read"))
        with pytest.raises(TransportError) as exc_info:
            _post(transport)
        assert classify(exc_info.value).kind is ErrorKind.NETWORK_ERROR

    def test_server_error_without_json(self) -> None:
        transport, _ = _transport(_response(502, text="<html>Bad gateway</html>"))
        with pytest.raises(TransportError) as exc_info:
            _post(transport)
        err = classify(exc_info.value)
        assert err.kind is ErrorKind.UNKNOWN
        assert "HTTP 502" in err.message

    def test_missing_data_is_transport_error(self) -> None:
        transport, _ = _transport(_response(200, {"unexpected": True}))
        with pytest.raises(TransportError):
            _post(transport)

    def test_other_request_exception(self) -> None:
        transport, _ = _transport(requests.exceptions.InvalidURL("bad url"))
        with pytest.raises(TransportError, match="bad url"):
            _post(transport)
