"""GraphQL documents sent to the Fireflies API.

Variable names are part of the remote contract and must not change:
``limit``, ``skip``, ``fromDate``, ``toDate``, ``mine``,
``participant_email`` and ``id``.
"""

from __future__ import annotations

USER_QUERY: str = """
  query {
    user {
      user_id
      name
      email
      num_transcripts
      minutes_consumed
      is_admin
    }
  }
"""

_TRANSCRIPT_BASE_FIELDS: str = """
      id
      title
      dateString
      duration
      organizer_email
      participants
      speakers {
        name
      }
"""

_SUMMARY_FIELDS: str = """
      summary {
        overview
        action_items
        topics_discussed
        keywords
        meeting_type
        outline
      }
"""

_SENTENCE_FIELDS: str = """
      sentences {
        speaker_name
        start_time
        end_time
        text
      }
"""

_TRANSCRIPTS_HEADER: str = (
    "query Transcripts($limit: Int, $skip: Int, $fromDate: DateTime, "
    "$toDate: DateTime, $mine: Boolean, $participant_email: String)"
)

_TRANSCRIPTS_CALL: str = (
    "transcripts(limit: $limit, skip: $skip, fromDate: $fromDate, "
    "toDate: $toDate, mine: $mine, participant_email: $participant_email)"
)

TRANSCRIPTS_QUERY: str = f"""
  {_TRANSCRIPTS_HEADER} {{
    {_TRANSCRIPTS_CALL} {{{_TRANSCRIPT_BASE_FIELDS}    }}
  }}
"""

TRANSCRIPTS_WITH_SUMMARIES_QUERY: str = f"""
  {_TRANSCRIPTS_HEADER} {{
    {_TRANSCRIPTS_CALL} {{{_TRANSCRIPT_BASE_FIELDS}{_SUMMARY_FIELDS}    }}
  }}
"""

TRANSCRIPT_DETAIL_QUERY: str = f"""
  query Transcript($id: String!) {{
    transcript(id: $id) {{{_TRANSCRIPT_BASE_FIELDS}{_SUMMARY_FIELDS}{_SENTENCE_FIELDS}    }}
  }}
"""
