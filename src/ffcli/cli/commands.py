"""Handlers for ``auth``, ``me``, ``list`` and ``show``.

Each handler receives an already-built
:class:`~ffcli.core.transcript_service.FirefliesService`, renders the
result to stdout and returns an exit code.  Errors propagate as
:class:`~ffcli.exceptions.FfcliError` to the boundary in
:mod:`ffcli.cli.app`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ffcli.cli import console, exit_codes
from ffcli.cli.markdown import (
    format_list_markdown,
    format_show_markdown,
    format_user_markdown,
)
from ffcli.core.error_classifier import make_error
from ffcli.core.models import ListOptions
from ffcli.core.transcript_service import FirefliesService
from ffcli.exceptions import ErrorKind, FfcliError
from ffcli.infra.credential_store import resolve_api_key, save_api_key

AUTH_USAGE: tuple[str, ...] = (
    "Usage: ffcli auth <KEY>",
    "       ffcli auth --check",
)


def _dump_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# auth
# ---------------------------------------------------------------------------

def handle_auth(
    service: FirefliesService,
    key: str | None,
    *,
    check: bool,
    config_path: Path | None = None,
) -> int:
    """Verify and store an API key, or check the active one."""
    if check:
        if not resolve_api_key(path=config_path):
            raise make_error(ErrorKind.NO_API_KEY)
        user = service.me()
        console.info(f"Authenticated as {user.name} ({user.email})")
        return exit_codes.SUCCESS

    if not key:
        for line in AUTH_USAGE:
            console.err.print(line, markup=False)
        return exit_codes.GENERAL_ERROR

    user = service.verify_key(key)
    try:
        save_api_key(key, config_path)
    except OSError as exc:
        raise FfcliError(
            f"Could not save API key: {exc.strerror or exc}",
            hint="Check permissions on your config directory.",
        ) from exc
    console.info(f"Authenticated as {user.name} ({user.email})")
    console.info("API key saved.")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# me
# ---------------------------------------------------------------------------

def handle_me(service: FirefliesService, *, markdown: bool) -> int:
    user = service.me()
    console.emit(format_user_markdown(user) if markdown else _dump_json(user.to_dict()))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------

def handle_list(service: FirefliesService, options: ListOptions, *, markdown: bool) -> int:
    transcripts = service.list_transcripts(options)
    if markdown:
        console.emit(format_list_markdown(transcripts))
    else:
        console.emit(_dump_json([t.to_dict() for t in transcripts]))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------

def handle_show(
    service: FirefliesService,
    transcript_id: str,
    *,
    include_transcript: bool = False,
    summary_only: bool = False,
    transcript_only: bool = False,
    markdown: bool = False,
) -> int:
    """Render one meeting, trimming summary/sentences per the flags."""
    transcript = service.get_transcript(transcript_id)
    include_transcript = include_transcript or transcript_only

    if markdown:
        console.emit(
            format_show_markdown(
                transcript,
                summary_only=summary_only,
                transcript_only=transcript_only,
                include_transcript=include_transcript,
            )
        )
    else:
        console.emit(
            _dump_json(
                transcript.to_dict(
                    include_summary=not transcript_only,
                    include_sentences=include_transcript and not summary_only,
                )
            )
        )
    return exit_codes.SUCCESS
