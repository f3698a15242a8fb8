"""
Interview turn protocol.

The interview has no session state of its own: everything is derived from the
application's transcript. The interview is complete once the candidate has
answered MAX_USER_TURNS times; the completing turn gets no assistant reply.

All helpers return new lists and never mutate the transcript they are given.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from models.interview_message import InterviewMessage, InterviewRole

MAX_USER_TURNS = 7

TranscriptEntry = Union[InterviewMessage, Dict[str, Any]]


@dataclass(frozen=True)
class TurnPlan:
    transcript: List[Dict[str, Any]]
    is_first_message: bool
    user_turns: int
    completed: bool


def _role_of(entry: TranscriptEntry) -> str:
    if isinstance(entry, InterviewMessage):
        return entry.role.value
    return entry.get("role", "")


def count_user_turns(transcript: Sequence[TranscriptEntry]) -> int:
    return sum(1 for entry in transcript if _role_of(entry) == InterviewRole.USER.value)


def is_interview_complete(transcript: Sequence[TranscriptEntry]) -> bool:
    return count_user_turns(transcript) >= MAX_USER_TURNS


def append_message(
    transcript: Sequence[TranscriptEntry],
    role: Union[str, InterviewRole],
    content: str,
    timestamp: Optional[datetime] = None,
) -> List[Dict[str, Any]]:
    """Return a copy of the transcript with one message appended."""
    message = InterviewMessage(
        role=InterviewRole(role),
        content=content,
        timestamp=timestamp or datetime.utcnow(),
    )
    return [_as_dict(entry) for entry in transcript] + [message.to_json()]


def _as_dict(entry: TranscriptEntry) -> Dict[str, Any]:
    if isinstance(entry, InterviewMessage):
        return entry.to_json()
    return dict(entry)


def prepare_turn(
    transcript: Optional[Sequence[TranscriptEntry]],
    utterance: Optional[str],
) -> TurnPlan:
    """
    Fold the candidate's utterance into the transcript and decide completion.

    The first turn opens the interview: any utterance sent with it is ignored
    and the assistant speaks first. A later turn without an utterance appends
    nothing, so the assistant simply speaks again (re-prompt).

    Args:
        transcript: Current interview transcript (may be empty or None)
        utterance: What the candidate said this turn

    Returns:
        TurnPlan with the new transcript, user turn count and completion flag
    """
    transcript = list(transcript or [])
    is_first_message = len(transcript) == 0
    has_utterance = utterance is not None and bool(utterance.strip())

    if is_first_message or not has_utterance:
        updated = [_as_dict(entry) for entry in transcript]
    else:
        updated = append_message(transcript, InterviewRole.USER, utterance.strip())

    user_turns = count_user_turns(updated)
    return TurnPlan(
        transcript=updated,
        is_first_message=is_first_message,
        user_turns=user_turns,
        completed=user_turns >= MAX_USER_TURNS,
    )
