"""
Unit tests for the interview turn protocol.

Run: pytest tests/unit/test_interview_protocol.py -v
"""

from datetime import datetime

import pytest

from models.interview_message import InterviewMessage, InterviewRole
from pipeline.interview import (
    MAX_USER_TURNS,
    append_message,
    count_user_turns,
    is_interview_complete,
    prepare_turn,
)


def _transcript(user_turns: int):
    """Alternating transcript with an assistant opener and `user_turns` answers."""
    transcript = [{"role": "assistant", "content": "Hello!", "timestamp": "2026-01-01T10:00:00"}]
    for i in range(user_turns):
        transcript.append({"role": "user", "content": f"Answer {i}", "timestamp": "2026-01-01T10:01:00"})
        transcript.append({"role": "assistant", "content": f"Question {i}", "timestamp": "2026-01-01T10:02:00"})
    return transcript


class TestCounting:

    def test_empty_transcript(self):
        assert count_user_turns([]) == 0
        assert not is_interview_complete([])

    def test_counts_only_user_messages(self):
        assert count_user_turns(_transcript(3)) == 3

    def test_accepts_typed_messages(self):
        transcript = [
            InterviewMessage(role=InterviewRole.ASSISTANT, content="Hi"),
            InterviewMessage(role=InterviewRole.USER, content="Hello"),
        ]
        assert count_user_turns(transcript) == 1

    def test_complete_at_max_user_turns(self):
        assert is_interview_complete(_transcript(MAX_USER_TURNS))
        assert not is_interview_complete(_transcript(MAX_USER_TURNS - 1))


class TestAppendMessage:

    def test_returns_new_list(self):
        original = _transcript(1)
        updated = append_message(original, "user", "More")
        assert len(original) == 3
        assert len(updated) == 4
        assert updated[-1]["role"] == "user"
        assert updated[-1]["content"] == "More"

    def test_uses_given_timestamp(self):
        ts = datetime(2026, 3, 1, 9, 30)
        updated = append_message([], InterviewRole.ASSISTANT, "Hi", timestamp=ts)
        assert updated[0]["timestamp"] == "2026-03-01T09:30:00"

    def test_invalid_role(self):
        with pytest.raises(ValueError):
            append_message([], "system", "Hi")


class TestPrepareTurn:

    def test_first_turn_ignores_utterance(self):
        plan = prepare_turn([], "Hi there")
        assert plan.is_first_message
        assert plan.transcript == []
        assert plan.user_turns == 0
        assert not plan.completed

    def test_first_turn_with_none_transcript(self):
        plan = prepare_turn(None, None)
        assert plan.is_first_message

    def test_later_turn_appends_stripped_utterance(self):
        plan = prepare_turn(_transcript(0), "  I have five years of experience.  ")
        assert not plan.is_first_message
        assert plan.transcript[-1]["content"] == "I have five years of experience."
        assert plan.user_turns == 1
        assert not plan.completed

    @pytest.mark.parametrize("utterance", [None, "", "   "])
    def test_later_turn_without_utterance_appends_nothing(self, utterance):
        transcript = _transcript(1)
        plan = prepare_turn(transcript, utterance)
        assert not plan.is_first_message
        assert plan.transcript == transcript
        assert plan.user_turns == 1
        assert not plan.completed

    def test_seventh_answer_completes(self):
        plan = prepare_turn(_transcript(MAX_USER_TURNS - 1), "Final answer")
        assert plan.user_turns == MAX_USER_TURNS
        assert plan.completed

    def test_does_not_mutate_input(self):
        transcript = _transcript(2)
        prepare_turn(transcript, "Another answer")
        assert count_user_turns(transcript) == 2
