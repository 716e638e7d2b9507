"""``requests``-backed implementation of :class:`~ffcli.core.protocols.Transport`.

This module is the **only** place in the codebase that imports
``requests``.  Every ``requests`` exception is caught here and re-raised
as a :class:`~ffcli.exceptions.TransportError`; GraphQL ``errors``
payloads become :class:`~ffcli.exceptions.ProtocolError`.  The request
executor classifies both.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import requests

from ffcli.exceptions import ProtocolError, TransportError
from ffcli.version import __version__


class RequestsTransport:
    """Concrete :class:`Transport` backed by a :class:`requests.Session`.

    Usage::

        with RequestsTransport() as transport:
            data = transport.post(url, payload, headers=headers, timeout=30)
    """

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session: requests.Session = session or requests.Session()
        self._session.headers.update(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": f"ffcli/{__version__}",
            }
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def post(
        self,
        url: str,
        payload: Mapping[str, Any],
        *,
        headers: Mapping[str, str],
        timeout: float,
    ) -> dict[str, Any]:
        """POST *payload* and return the ``data`` member of the response.

        Raises
        ------
        ProtocolError
            When the body carries a non-empty ``errors`` list, or for a
            bare HTTP 429.
        TransportError
            For connection failures, timeouts and unusable bodies.
        """
        try:
            response = self._session.post(
                url,
                json=dict(payload),
                headers=dict(headers),
                timeout=timeout,
            )
        except requests.exceptions.Timeout as exc:
            raise TransportError(f"Request timed out after {timeout:g}s: {exc}") from exc
        except requests.exceptions.ConnectionError as exc:
            raise TransportError(f"fetch failed: {exc}") from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(str(exc)) from exc

        try:
            body: Any = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            errors = body.get("errors")
            if isinstance(errors, list) and errors:
                raise ProtocolError(
                    [e if isinstance(e, dict) else {"message": str(e)} for e in errors],
                    status=response.status_code,
                )
            data = body.get("data")
            if response.ok and isinstance(data, dict):
                return data

        if response.status_code == 429:
            raise ProtocolError(
                [{"message": "too_many_requests"}],
                status=response.status_code,
            )
        if response.status_code == 401:
            raise ProtocolError(
                [{"message": "Unauthorized"}],
                status=response.status_code,
            )

        snippet = (response.text or "").strip()[:200]
        raise TransportError(
            f"Unexpected response from Fireflies API (HTTP {response.status_code})"
            + (f": {snippet}" if snippet else "")
        )
