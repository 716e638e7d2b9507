"""Domain models for ffcli.

All models are **frozen** dataclasses — immutable value objects.  Each
one knows how to build itself from the raw GraphQL dict (tolerating
missing or malformed fields) and how to render itself back to a dict
keyed by the wire field names, which is what ``--json`` prints.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _opt_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _opt_number(value: object) -> int | float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    return None


def _str_list(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def _dict_list(value: object) -> list[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class QueryRequest:
    """One GraphQL document plus its variables."""

    document: str
    variables: Mapping[str, Any] = field(default_factory=dict)

    def payload(self) -> dict[str, Any]:
        """Return the JSON body, omitting variables that are ``None``."""
        return {
            "query": self.document,
            "variables": _drop_none(dict(self.variables)),
        }


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class User:
    """The account that owns the API key."""

    user_id: str | None
    name: str | None
    email: str | None
    num_transcripts: int | float | None
    minutes_consumed: int | float | None
    is_admin: bool

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> User:
        return cls(
            user_id=_opt_str(raw.get("user_id")),
            name=_opt_str(raw.get("name")),
            email=_opt_str(raw.get("email")),
            num_transcripts=_opt_number(raw.get("num_transcripts")),
            minutes_consumed=_opt_number(raw.get("minutes_consumed")),
            is_admin=raw.get("is_admin") is True,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "num_transcripts": self.num_transcripts,
            "minutes_consumed": self.minutes_consumed,
            "is_admin": self.is_admin,
        }


# ---------------------------------------------------------------------------
# Transcript parts
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TranscriptSummary:
    """AI-generated summary attached to a transcript."""

    overview: str | None = None
    action_items: str | None = None
    topics_discussed: str | None = None
    keywords: tuple[str, ...] = ()
    meeting_type: str | None = None
    outline: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> TranscriptSummary:
        return cls(
            overview=_opt_str(raw.get("overview")),
            action_items=_opt_str(raw.get("action_items")),
            topics_discussed=_opt_str(raw.get("topics_discussed")),
            keywords=_str_list(raw.get("keywords")),
            meeting_type=_opt_str(raw.get("meeting_type")),
            outline=_opt_str(raw.get("outline")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "overview": self.overview,
            "action_items": self.action_items,
            "topics_discussed": self.topics_discussed,
            "keywords": list(self.keywords),
            "meeting_type": self.meeting_type,
            "outline": self.outline,
        }


@dataclass(frozen=True, slots=True)
class Sentence:
    """One spoken sentence with speaker and timing (seconds)."""

    speaker_name: str
    start_time: float
    end_time: float
    text: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Sentence:
        return cls(
            speaker_name=_opt_str(raw.get("speaker_name")) or "Unknown",
            start_time=float(_opt_number(raw.get("start_time")) or 0),
            end_time=float(_opt_number(raw.get("end_time")) or 0),
            text=_opt_str(raw.get("text")) or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "speaker_name": self.speaker_name,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "text": self.text,
        }


# ---------------------------------------------------------------------------
# Transcript
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Transcript:
    """A recorded meeting.

    List queries fill the base fields only (plus ``summary`` when
    requested); the detail query also fills ``sentences``.
    """

    id: str
    title: str | None
    date_string: str | None
    duration: int | float | None
    """Meeting length in minutes."""

    organizer_email: str | None
    participants: tuple[str, ...] = ()
    speakers: tuple[str, ...] = ()
    summary: TranscriptSummary | None = None
    sentences: tuple[Sentence, ...] | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Transcript:
        raw_summary = raw.get("summary")
        raw_sentences = raw.get("sentences")
        return cls(
            id=str(raw.get("id") or ""),
            title=_opt_str(raw.get("title")),
            date_string=_opt_str(raw.get("dateString")),
            duration=_opt_number(raw.get("duration")),
            organizer_email=_opt_str(raw.get("organizer_email")),
            participants=_str_list(raw.get("participants")),
            speakers=tuple(
                name
                for name in (_opt_str(s.get("name")) for s in _dict_list(raw.get("speakers")))
                if name
            ),
            summary=(
                TranscriptSummary.from_dict(raw_summary)
                if isinstance(raw_summary, Mapping)
                else None
            ),
            sentences=(
                tuple(Sentence.from_dict(s) for s in _dict_list(raw_sentences))
                if isinstance(raw_sentences, list)
                else None
            ),
        )

    def to_dict(
        self,
        *,
        include_summary: bool = True,
        include_sentences: bool = True,
    ) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "dateString": self.date_string,
            "duration": self.duration,
            "organizer_email": self.organizer_email,
            "participants": list(self.participants),
            "speakers": [{"name": name} for name in self.speakers],
        }
        if include_summary and self.summary is not None:
            data["summary"] = self.summary.to_dict()
        if include_sentences and self.sentences is not None:
            data["sentences"] = [s.to_dict() for s in self.sentences]
        return data


# ---------------------------------------------------------------------------
# List filters
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ListOptions:
    """Filters accepted by ``ffcli list``."""

    limit: int = 20
    skip: int | None = None
    from_date: str | None = None
    to_date: str | None = None
    search: str | None = None
    participant: str | None = None
    mine: bool = False
    include_summaries: bool = False
