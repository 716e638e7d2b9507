"""Core / service layer — request pipeline and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O; transports are injected.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from ffcli.core.error_classifier import classify
from ffcli.core.executor import RequestExecutor
from ffcli.core.models import (
    ListOptions,
    QueryRequest,
    Sentence,
    Transcript,
    TranscriptSummary,
    User,
)
from ffcli.core.protocols import KeyResolver, Transport
from ffcli.core.transcript_service import FirefliesService

__all__: list[str] = [
    "FirefliesService",
    "KeyResolver",
    "ListOptions",
    "QueryRequest",
    "RequestExecutor",
    "Sentence",
    "Transcript",
    "TranscriptSummary",
    "Transport",
    "User",
    "classify",
]
