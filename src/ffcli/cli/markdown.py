"""Markdown rendering of fetched Fireflies data.

Pure string builders — no I/O.  ``format_show_markdown`` emits YAML
frontmatter first so the output can be dropped straight into a notes
vault.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from ffcli.core.models import Transcript, User


def _num(value: int | float | None, default: str = "0") -> str:
    """Render a number without a spurious ``.0``."""
    if value is None:
        return default
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_timestamp(seconds: float) -> str:
    """Render *seconds* as ``M:SS``, or ``H:MM:SS`` from one hour up."""
    total = int(max(seconds, 0))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_date(date_string: str) -> str:
    """Render an ISO timestamp as local ``MM/DD/YYYY, HH:MM AM``.

    Unparseable input is returned unchanged.
    """
    try:
        parsed = datetime.fromisoformat(date_string.replace("Z", "+00:00"))
    except ValueError:
        return date_string
    return parsed.astimezone().strftime("%m/%d/%Y, %I:%M %p")


def format_user_markdown(user: User) -> str:
    lines = [
        f"# {user.name or 'Unknown'}",
        "",
        f"**Email:** {user.email or 'N/A'}",
        f"**Transcripts:** {_num(user.num_transcripts)}",
        f"**Minutes Consumed:** {_num(user.minutes_consumed)}",
        f"**Admin:** {'Yes' if user.is_admin else 'No'}",
    ]
    return "\n".join(lines) + "\n"


def format_list_markdown(meetings: Sequence[Transcript]) -> str:
    """Render a meeting list as a Markdown table."""
    if not meetings:
        return "No meetings found.\n"

    lines = [
        "| Title | Date | Duration | Organizer | Participants |",
        "|-------|------|----------|-----------|--------------|",
    ]
    for m in meetings:
        duration = f"{_num(m.duration)} min" if m.duration is not None else "N/A"
        participants = ", ".join(m.participants) or "N/A"
        lines.append(
            f"| {m.title or 'Untitled'} | {m.date_string or 'N/A'} | {duration} "
            f"| {m.organizer_email or 'N/A'} | {participants} |"
        )
    return "\n".join(lines) + "\n"


def _frontmatter(transcript: Transcript) -> list[str]:
    summary = transcript.summary
    title = (transcript.title or "Untitled").replace('"', '\\"')

    lines = [
        "---",
        f"id: {transcript.id}",
        f'title: "{title}"',
        f"date: {transcript.date_string or ''}",
        f"duration: {_num(transcript.duration)}",
        "participants:",
    ]
    lines.extend(f"  - {p}" for p in transcript.participants)
    lines.append(f"organizer: {transcript.organizer_email or ''}")
    if summary is not None and summary.meeting_type:
        lines.append(f'meeting_type: "{summary.meeting_type}"')
    if summary is not None and summary.keywords:
        lines.append("keywords:")
        lines.extend(f"  - {k}" for k in summary.keywords)
    lines.append("source: fireflies")
    lines.append("---")
    return lines


def format_show_markdown(
    transcript: Transcript,
    *,
    summary_only: bool = False,
    transcript_only: bool = False,
    include_transcript: bool = False,
) -> str:
    """Render one meeting as a Markdown document.

    Summary sections are skipped with *transcript_only*; the sentence
    transcript is shown with *include_transcript* or *transcript_only*,
    never with *summary_only*.
    """
    lines = _frontmatter(transcript)
    lines.append("")

    lines.append(f"# {transcript.title or 'Untitled'}")
    lines.append("")

    date = format_date(transcript.date_string) if transcript.date_string else "N/A"
    participants = (
        ", ".join(transcript.speakers) or ", ".join(transcript.participants) or "N/A"
    )
    lines.append(f"**Date:** {date}")
    lines.append(f"**Duration:** {_num(transcript.duration)} minutes")
    lines.append(f"**Participants:** {participants}")
    lines.append("")

    summary = transcript.summary
    if summary is not None and not transcript_only:
        for heading, body in (
            ("Overview", summary.overview),
            ("Key Topics", summary.topics_discussed),
            ("Action Items", summary.action_items),
            ("Outline", summary.outline),
        ):
            if body:
                lines.extend([f"## {heading}", "", body, ""])

    show_sentences = (include_transcript or transcript_only) and not summary_only
    if show_sentences and transcript.sentences:
        lines.extend(["## Transcript", ""])
        for s in transcript.sentences:
            lines.append(f"**{s.speaker_name}** ({format_timestamp(s.start_time)}): {s.text}")
            lines.append("")

    return "\n".join(lines)
