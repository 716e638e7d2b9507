"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol

KeyResolver = Callable[[], str | None]
"""Zero-argument callable returning the active API key, or ``None``."""

Sleeper = Callable[[float], None]


class Transport(Protocol):
    """Contract for GraphQL-over-HTTP backends.

    Any object that implements :meth:`post` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def post(
        self,
        url: str,
        payload: Mapping[str, Any],
        *,
        headers: Mapping[str, str],
        timeout: float,
    ) -> dict[str, Any]:
        """Send *payload* as JSON and return the GraphQL ``data`` object.

        Raises
        ------
        ProtocolError
            When the response carries a GraphQL ``errors`` list.
        TransportError
            When the HTTP exchange fails or the body is unusable.
        """
        ...  # pragma: no cover
