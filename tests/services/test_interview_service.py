"""
Tests for the interview turn protocol as run by InterviewService.

Run: pytest tests/services/test_interview_service.py -v
"""

import pytest

from pipeline.interview import MAX_USER_TURNS
from repositories import ApplicationEventRepository
from services.interview_service import InterviewService
from utils.exceptions import NotFoundError, UpstreamServiceError, ValidationError


@pytest.fixture
def service(db, reasoning):
    return InterviewService(db, reasoning)


def _transcript_with_answers(answers: int):
    transcript = [{"role": "assistant", "content": "Hei!", "timestamp": "2026-01-01T10:00:00"}]
    for i in range(answers):
        transcript.append({"role": "user", "content": f"Svar {i}", "timestamp": "2026-01-01T10:01:00"})
        transcript.append({"role": "assistant", "content": f"Spørsmål {i}", "timestamp": "2026-01-01T10:02:00"})
    return transcript


class TestOpeningTurn:

    def test_assistant_speaks_first(self, service, make_application, reasoning):
        application = make_application("interview")

        result = service.post_interview_turn(application.id, "ignored greeting")

        assert result["message"] == reasoning.reply
        assert not result["completed"]
        assert result["user_turns"] == 0
        assert [m["role"] for m in result["transcript"]] == ["assistant"]
        assert result["application"].interview_transcript == result["transcript"]
        assert result["application"].version == 2

    def test_opening_turn_does_not_change_status(self, service, make_application):
        application = make_application("reviewing")
        result = service.post_interview_turn(application.id)
        assert result["application"].status == "reviewing"


class TestAnswerTurns:

    def test_answer_is_appended_before_reply(self, service, make_application):
        application = make_application("interview", interview_transcript=_transcript_with_answers(0))

        result = service.post_interview_turn(application.id, "  Jeg har jobbet seks år.  ")

        roles = [m["role"] for m in result["transcript"]]
        assert roles == ["assistant", "user", "assistant"]
        assert result["transcript"][1]["content"] == "Jeg har jobbet seks år."
        assert result["user_turns"] == 1

    @pytest.mark.parametrize("utterance", [None, "   "])
    def test_missing_answer_reprompts(self, service, make_application, reasoning, utterance):
        transcript = _transcript_with_answers(2)
        application = make_application("interview", interview_transcript=transcript)

        result = service.post_interview_turn(application.id, utterance)

        assert reasoning.calls == ["run_interview_turn"]
        assert result["message"] == reasoning.reply
        assert not result["completed"]
        assert result["user_turns"] == 2
        assert result["transcript"][:-1] == transcript
        assert result["transcript"][-1]["role"] == "assistant"
        assert result["application"].version == 2

    def test_reply_failure_saves_nothing(self, service, db, make_application, reasoning):
        transcript = _transcript_with_answers(2)
        application = make_application("interview", interview_transcript=transcript)
        reasoning.fail_on = "run_interview_turn"

        with pytest.raises(UpstreamServiceError):
            service.post_interview_turn(application.id, "Svar")

        db.refresh(application)
        assert application.interview_transcript == transcript
        assert application.version == 1


class TestCompletion:

    def test_last_answer_completes_without_reply(self, service, make_application, reasoning):
        application = make_application(
            "interview", interview_transcript=_transcript_with_answers(MAX_USER_TURNS - 1)
        )

        result = service.post_interview_turn(application.id, "Siste svar")

        assert result["completed"]
        assert result["message"] == ""
        assert result["user_turns"] == MAX_USER_TURNS
        assert result["transcript"][-1]["role"] == "user"
        assert "run_interview_turn" not in reasoning.calls
        assert reasoning.calls == ["summarize_interview", "analyze_candidate"]

        updated = result["application"]
        assert updated.interview_completed
        assert updated.interview_summary == reasoning.summary
        assert updated.ai_analysis["summary"] == "Erfaren kandidat"
        assert updated.status == "interview"

    def test_completion_from_reference_check_moves_back_to_interview(self, service, make_application):
        application = make_application(
            "reference_check", interview_transcript=_transcript_with_answers(MAX_USER_TURNS - 1)
        )
        result = service.post_interview_turn(application.id, "Siste svar")
        assert result["application"].status == "interview"

    def test_completion_records_event(self, service, db, make_application):
        application = make_application(
            "reviewing", interview_transcript=_transcript_with_answers(MAX_USER_TURNS - 1)
        )
        service.post_interview_turn(application.id, "Siste svar")

        events = ApplicationEventRepository(db).get_by_application(application.id)
        assert events[-1].action == "complete_interview"
        assert events[-1].detail == {"user_turns": MAX_USER_TURNS}

    def test_summary_failure_saves_nothing(self, service, db, make_application, reasoning):
        application = make_application(
            "interview", interview_transcript=_transcript_with_answers(MAX_USER_TURNS - 1)
        )
        reasoning.fail_on = "summarize_interview"

        with pytest.raises(UpstreamServiceError):
            service.post_interview_turn(application.id, "Siste svar")

        db.refresh(application)
        assert not application.interview_completed
        assert len(application.interview_transcript) == 2 * MAX_USER_TURNS - 1

    def test_completed_interview_is_closed(self, service, make_application):
        application = make_application(
            "interview",
            interview_transcript=_transcript_with_answers(MAX_USER_TURNS),
            interview_completed=True,
        )
        with pytest.raises(ValidationError, match="already been completed"):
            service.post_interview_turn(application.id, "Mer")


class TestClosedApplications:

    @pytest.mark.parametrize("status", ["hired", "rejected"])
    def test_terminal_application(self, service, make_application, status):
        application = make_application(status)
        with pytest.raises(ValidationError):
            service.post_interview_turn(application.id)

    def test_unknown_application(self, service):
        with pytest.raises(NotFoundError):
            service.post_interview_turn("missing")


class TestInterviewState:

    def test_state(self, service, make_application, job):
        application = make_application("interview", interview_transcript=_transcript_with_answers(3))

        state = service.get_interview_state(application.id)

        assert state["job_title"] == job.title
        assert state["camera_required"] == "optional"
        assert state["user_turns"] == 3
        assert state["max_user_turns"] == MAX_USER_TURNS
        assert not state["interview_completed"]
