"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Fireflies HTTP endpoint and
the per-user config file.  HTTP failures are re-raised as the raw
:class:`~ffcli.exceptions.TransportError` / :class:`~ffcli.exceptions.ProtocolError`
types for the core executor to classify.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from ffcli.infra.credential_store import get_config_path, resolve_api_key, save_api_key
from ffcli.infra.http_transport import RequestsTransport

__all__: list[str] = [
    "RequestsTransport",
    "get_config_path",
    "resolve_api_key",
    "save_api_key",
]
