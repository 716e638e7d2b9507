"""Request executor — authenticated GraphQL calls with bounded retry.

The executor delegates the HTTP exchange to a
:class:`~ffcli.core.protocols.Transport` and the API key lookup to a
:data:`~ffcli.core.protocols.KeyResolver`, both injected at
construction time.  It is responsible for:

* Refusing to touch the network when no API key resolves.
* Attaching the key as a bearer ``Authorization`` header.
* Retrying rate-limited attempts with exponential backoff.
* Ensuring only :class:`~ffcli.exceptions.FirefliesApiError` escapes.

Retry states: attempting → backing-off only on ``too_many_requests``
with attempts remaining; attempting → succeeded on any data payload;
attempting → failed on any other kind or once attempts run out.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from ffcli.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from ffcli.core.error_classifier import classify, make_error
from ffcli.core.models import QueryRequest
from ffcli.core.protocols import KeyResolver, Sleeper, Transport
from ffcli.exceptions import ErrorKind

MAX_ATTEMPTS: int = 3

logger = logging.getLogger(__name__)


class RequestExecutor:
    """Send :class:`QueryRequest` objects to the Fireflies API.

    Parameters
    ----------
    transport:
        Any object satisfying the :class:`Transport` protocol.
    resolve_key:
        Called once per :meth:`execute` to obtain the API key.
    endpoint:
        GraphQL endpoint URL.
    timeout:
        Per-attempt HTTP timeout in seconds.
    max_attempts:
        Hard ceiling on attempts, including the first one.
    sleep:
        Backoff wait; injectable so tests need not block.
    """

    def __init__(
        self,
        transport: Transport,
        resolve_key: KeyResolver,
        *,
        endpoint: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = MAX_ATTEMPTS,
        sleep: Sleeper = time.sleep,
    ) -> None:
        self._transport: Transport = transport
        self._resolve_key: KeyResolver = resolve_key
        self._endpoint = endpoint
        self._timeout = timeout
        self._max_attempts = max(1, max_attempts)
        self._sleep: Sleeper = sleep

    def with_key(self, api_key: str) -> RequestExecutor:
        """Return a copy of this executor bound to a fixed *api_key*."""
        return RequestExecutor(
            self._transport,
            lambda: api_key,
            endpoint=self._endpoint,
            timeout=self._timeout,
            max_attempts=self._max_attempts,
            sleep=self._sleep,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, request: QueryRequest) -> dict[str, Any]:
        """Run *request* and return the GraphQL ``data`` object.

        Raises
        ------
        FirefliesApiError
            ``no_api_key`` before any network attempt when no key
            resolves; otherwise the classified failure of the last
            attempt.
        """
        api_key = self._resolve_key()
        if not api_key:
            raise make_error(ErrorKind.NO_API_KEY)

        headers = {"Authorization": f"Bearer {api_key}"}
        payload = request.payload()
        last_error = make_error(ErrorKind.TOO_MANY_REQUESTS)

        for attempt in range(self._max_attempts):
            if attempt > 0:
                # 1s, 2s, 4s ... between consecutive attempts.
                delay = float(2 ** (attempt - 1))
                logger.warning("Rate limited by Fireflies API; retrying in %.0fs", delay)
                self._sleep(delay)

            logger.debug(
                "POST %s (attempt %d/%d)", self._endpoint, attempt + 1, self._max_attempts,
            )
            try:
                return self._transport.post(
                    self._endpoint,
                    payload,
                    headers=headers,
                    timeout=self._timeout,
                )
            except Exception as exc:
                error = classify(exc)
                logger.debug("Attempt %d failed: %s", attempt + 1, error.kind.value)
                if error.kind is not ErrorKind.TOO_MANY_REQUESTS:
                    if error is exc:
                        raise
                    raise error from exc
                last_error = error

        raise last_error
