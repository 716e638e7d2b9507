"""Typed Fireflies operations built on :class:`RequestExecutor`.

This is the service class consumed by the CLI layer.  It builds query
variables, runs the documents from :mod:`ffcli.core.queries` and parses
the ``data`` payloads into domain models.

Guarantees
----------
* No I/O of its own — all network access goes through the executor.
* Only :class:`~ffcli.exceptions.FfcliError` subclasses escape.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from ffcli.core.error_classifier import make_error
from ffcli.core.executor import RequestExecutor
from ffcli.core.models import ListOptions, QueryRequest, Transcript, User
from ffcli.core.queries import (
    TRANSCRIPT_DETAIL_QUERY,
    TRANSCRIPTS_QUERY,
    TRANSCRIPTS_WITH_SUMMARIES_QUERY,
    USER_QUERY,
)
from ffcli.exceptions import ErrorKind, FirefliesApiError, InvalidOptionError


def to_api_datetime(value: str, *, option: str = "date") -> str:
    """Convert ``YYYY-MM-DD`` or an ISO-8601 timestamp to the API's UTC form.

    Bare dates are taken as UTC midnight; naive timestamps as local
    time.  The result looks like ``2024-03-01T00:00:00.000Z``.
    """
    text = value.strip()
    try:
        if len(text) == 10:
            parsed = datetime.combine(date.fromisoformat(text), datetime.min.time(), timezone.utc)
        else:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
            if parsed.tzinfo is None:
                parsed = parsed.astimezone()
    except ValueError as exc:
        raise InvalidOptionError(
            f"Invalid {option}: {value!r}",
            hint="Use YYYY-MM-DD, e.g. 2024-03-01.",
        ) from exc
    utc = parsed.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def build_list_variables(options: ListOptions) -> dict[str, Any]:
    """Translate :class:`ListOptions` into GraphQL variables.

    Only set filters are included; ``search`` is applied client side
    and never sent.
    """
    if options.limit < 1:
        raise InvalidOptionError(f"Invalid limit: {options.limit}", hint="Use a positive integer.")
    if options.skip is not None and options.skip < 0:
        raise InvalidOptionError(f"Invalid skip: {options.skip}", hint="Use zero or a positive integer.")

    variables: dict[str, Any] = {"limit": options.limit}
    if options.skip:
        variables["skip"] = options.skip
    if options.from_date:
        variables["fromDate"] = to_api_datetime(options.from_date, option="--from date")
    if options.to_date:
        variables["toDate"] = to_api_datetime(options.to_date, option="--to date")
    if options.mine:
        variables["mine"] = True
    if options.participant:
        variables["participant_email"] = options.participant
    return variables


def filter_by_title(transcripts: list[Transcript], term: str | None) -> list[Transcript]:
    """Keep transcripts whose title contains *term*, case-insensitively."""
    if not term:
        return transcripts
    needle = term.lower()
    return [t for t in transcripts if t.title and needle in t.title.lower()]


class FirefliesService:
    """High-level Fireflies operations.

    Parameters
    ----------
    executor:
        The request executor used for every call.
    """

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor: RequestExecutor = executor

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def me(self) -> User:
        """Return the user owning the active API key."""
        return self._fetch_user(self._executor)

    def verify_key(self, api_key: str) -> User:
        """Run the user query with *api_key* instead of the resolved key."""
        return self._fetch_user(self._executor.with_key(api_key))

    def list_transcripts(self, options: ListOptions) -> list[Transcript]:
        """Return one page of transcripts matching *options*."""
        document = (
            TRANSCRIPTS_WITH_SUMMARIES_QUERY if options.include_summaries else TRANSCRIPTS_QUERY
        )
        data = self._executor.execute(QueryRequest(document, build_list_variables(options)))
        raw = data.get("transcripts")
        items = [
            Transcript.from_dict(entry)
            for entry in (raw if isinstance(raw, list) else [])
            if isinstance(entry, Mapping)
        ]
        return filter_by_title(items, options.search)

    def get_transcript(self, transcript_id: str) -> Transcript:
        """Return the full detail of one transcript.

        Raises
        ------
        FirefliesApiError
            ``object_not_found`` when the API answers with ``null``.
        """
        if not transcript_id.strip():
            raise InvalidOptionError("Meeting ID must not be empty.")
        data = self._executor.execute(
            QueryRequest(TRANSCRIPT_DETAIL_QUERY, {"id": transcript_id})
        )
        raw = data.get("transcript")
        if not isinstance(raw, Mapping):
            raise make_error(ErrorKind.OBJECT_NOT_FOUND)
        return Transcript.from_dict(raw)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _fetch_user(executor: RequestExecutor) -> User:
        data = executor.execute(QueryRequest(USER_QUERY))
        raw = data.get("user")
        if not isinstance(raw, Mapping):
            raise FirefliesApiError(ErrorKind.UNKNOWN, "Fireflies API returned no user data.")
        return User.from_dict(raw)
