"""
Tests for ApplicationService lifecycle actions.

Run: pytest tests/services/test_application_service.py -v
"""

import pytest

from models.application import Application
from models.candidate import Candidate
from services.application_service import ApplicationService
from tests.conftest import FakeNotifier
from utils.exceptions import (
    ConflictError,
    DuplicateApplicationError,
    NotFoundError,
    UpstreamServiceError,
    ValidationError,
)


@pytest.fixture
def service(db, reasoning, notifier):
    return ApplicationService(db, reasoning, notifier)


class TestSubmitApplication:

    def test_creates_pending_application_with_questions(self, service, db, job, candidate, reasoning):
        reasoning.language = "Swedish"
        reasoning.questions = ["  Varför söker du? ", "Varför söker du?", ""]

        application = service.submit_application(
            job.id, candidate.id, "Jag har arbetat i vården.", cv_url="https://files/cv.pdf"
        )

        assert application.status == "pending"
        assert application.follow_up_questions == ["Varför söker du?"]
        assert application.version == 1
        db.refresh(candidate)
        assert candidate.language == "Swedish"
        assert candidate.cv_url == "https://files/cv.pdf"
        assert candidate.cv_text == "Jag har arbetat i vården."

    def test_records_submit_event(self, service, job, candidate):
        application = service.submit_application(job.id, candidate.id, "CV")
        events = service.list_events(application.id)
        assert [e.action for e in events] == ["submit_application"]
        assert events[0].to_status == "pending"

    def test_duplicate_application(self, service, job, candidate):
        service.submit_application(job.id, candidate.id, "CV")
        with pytest.raises(DuplicateApplicationError):
            service.submit_application(job.id, candidate.id, "CV again")

    def test_unknown_job(self, service, candidate):
        with pytest.raises(NotFoundError):
            service.submit_application("missing", candidate.id, "CV")

    def test_empty_cv(self, service, job, candidate):
        with pytest.raises(ValidationError):
            service.submit_application(job.id, candidate.id, "   ")

    def test_question_generation_failure_saves_nothing(self, service, db, job, candidate, reasoning):
        reasoning.fail_on = "generate_follow_up_questions"
        with pytest.raises(UpstreamServiceError):
            service.submit_application(job.id, candidate.id, "CV")
        assert service.list_applications(candidate_id=candidate.id) == []


class TestSubmitFollowUpAnswers:

    def test_scores_and_moves_to_reviewing(self, service, make_application, reasoning):
        reasoning.score = 142
        application = make_application("pending")

        updated = service.submit_follow_up_answers(
            application.id, {"Hvorfor søker du?": " Jeg liker faget. ", "Tom": "  "}
        )

        assert updated.status == "reviewing"
        assert updated.score == 100
        assert updated.scoring_reasoning == "Relevant erfaring"
        assert updated.follow_up_answers == {"Hvorfor søker du?": "Jeg liker faget."}
        assert updated.ai_analysis["areasToExplore"] == ["Nattevakter"]
        assert updated.version == 2

    def test_event_recorded_with_score(self, service, make_application):
        application = make_application("pending")
        service.submit_follow_up_answers(application.id, {"Q": "A"})
        event = service.list_events(application.id)[-1]
        assert event.action == "submit_answers"
        assert (event.from_status, event.to_status) == ("pending", "reviewing")
        assert event.detail == {"score": 78}

    def test_requires_an_answer(self, service, make_application):
        application = make_application("pending")
        with pytest.raises(ValidationError):
            service.submit_follow_up_answers(application.id, {"Q": ""})

    def test_wrong_status(self, service, make_application, reasoning):
        application = make_application("interview")
        with pytest.raises(ValidationError):
            service.submit_follow_up_answers(application.id, {"Q": "A"})
        assert "score_candidate" not in reasoning.calls

    def test_scoring_failure_leaves_application_unchanged(self, service, db, make_application, reasoning):
        reasoning.fail_on = "analyze_candidate"
        application = make_application("pending")

        with pytest.raises(UpstreamServiceError):
            service.submit_follow_up_answers(application.id, {"Q": "A"})

        db.refresh(application)
        assert application.status == "pending"
        assert application.score is None
        assert application.version == 1


class TestAdvanceStatus:

    def test_pending_to_interview(self, service, make_application):
        application = make_application("pending")
        assert service.advance_status(application.id, "interview").status == "interview"

    def test_cannot_advance_to_hired(self, service, make_application):
        application = make_application("offer_sent")
        with pytest.raises(ValidationError):
            service.advance_status(application.id, "hired")

    def test_cannot_go_back(self, service, make_application):
        application = make_application("interview")
        with pytest.raises(ValidationError):
            service.advance_status(application.id, "reviewing")


class TestRejectApplication:

    def test_rejects_and_emails(self, service, make_application, candidate, notifier, reasoning):
        application = make_application("interview")

        result = service.reject_application(application.id)

        assert result["application"].status == "rejected"
        assert result["application"].rejection_sent
        assert result["notification"].success
        assert notifier.sent[0]["to"] == candidate.email
        assert "Takk for din søknad." in notifier.sent[0]["html"]
        assert reasoning.calls == ["generate_rejection_email"]

    def test_email_failure_does_not_undo_rejection(self, db, reasoning, make_application):
        service = ApplicationService(db, reasoning, FakeNotifier(succeed=False))
        application = make_application("reviewing")

        result = service.reject_application(application.id)

        assert result["application"].status == "rejected"
        assert not result["notification"].success

    def test_generation_failure_saves_nothing(self, service, db, make_application, reasoning, notifier):
        reasoning.fail_on = "generate_rejection_email"
        application = make_application("reviewing")
        with pytest.raises(UpstreamServiceError):
            service.reject_application(application.id)
        db.refresh(application)
        assert application.status == "reviewing"
        assert notifier.sent == []

    @pytest.mark.parametrize("status", ["hired", "rejected"])
    def test_terminal_status(self, service, make_application, status):
        application = make_application(status)
        with pytest.raises(ValidationError):
            service.reject_application(application.id)


class TestRecordingAndRawUpdate:

    def test_set_recording_url(self, service, make_application):
        application = make_application("interview")
        updated = service.set_recording_url(application.id, " https://cdn/rec.webm ")
        assert updated.recording_url == "https://cdn/rec.webm"

    def test_raw_update_bypasses_lifecycle_and_is_audited(self, service, make_application):
        application = make_application("rejected")

        updated = service.update_application_fields(application.id, {"status": "reviewing", "score": 55})

        assert updated.status == "reviewing"
        assert updated.score == 55
        event = service.list_events(application.id)[-1]
        assert event.action == "raw_update"
        assert event.actor == "admin"
        assert (event.from_status, event.to_status) == ("rejected", "reviewing")
        assert event.detail == {"fields": ["score", "status"]}

    @pytest.mark.parametrize("fields", [
        {},
        {"version": 9},
        {"status": "archived"},
        {"score": 101},
        {"score": True},
    ])
    def test_raw_update_rejects_bad_fields(self, service, make_application, fields):
        application = make_application("pending")
        with pytest.raises(ValidationError):
            service.update_application_fields(application.id, fields)

    @pytest.mark.parametrize("fields", [
        {"interview_transcript": [], "interview_completed": False},
        {"interview_transcript": []},
        {"interview_completed": False},
        {"interview_transcript": [{"role": "user", "content": "Rewritten", "timestamp": "2026-01-01T10:00:00"}]},
    ])
    def test_raw_update_cannot_rewrite_finished_interview(self, service, db, make_application, fields):
        transcript = [
            {"role": "assistant", "content": "Hei!", "timestamp": "2026-01-01T10:00:00"},
            {"role": "user", "content": "Svar", "timestamp": "2026-01-01T10:01:00"},
        ]
        application = make_application("interview", interview_transcript=transcript, interview_completed=True)

        with pytest.raises(ValidationError):
            service.update_application_fields(application.id, fields)

        db.refresh(application)
        assert application.interview_transcript == transcript
        assert application.interview_completed
        assert application.version == 1

    def test_raw_update_may_extend_transcript(self, service, make_application):
        transcript = [{"role": "assistant", "content": "Hei!", "timestamp": "2026-01-01T10:00:00"}]
        application = make_application("interview", interview_transcript=transcript)
        extended = transcript + [{"role": "user", "content": "Svar", "timestamp": "2026-01-01T10:01:00"}]

        updated = service.update_application_fields(application.id, {"interview_transcript": extended})

        assert updated.interview_transcript == extended


class TestListApplications:

    def test_orders_by_score_then_unscored(self, service, db, job, make_application):
        scored_low = make_application("reviewing", score=40)
        others = []
        for i, score in enumerate([90, None]):
            candidate = Candidate(name=f"Kandidat {i}", email=f"k{i}@example.no")
            db.add(candidate)
            db.commit()
            application = Application(job_id=job.id, candidate_id=candidate.id, score=score)
            db.add(application)
            db.commit()
            others.append(application.id)

        ids = [a.id for a in service.list_applications(job_id=job.id)]
        assert ids == [others[0], scored_low.id, others[1]]

    def test_filters_by_company_and_status(self, service, company, make_application):
        application = make_application("interview")
        assert [a.id for a in service.list_applications(company_id=company.id, status="interview")] == [application.id]
        assert service.list_applications(company_id=company.id, status="pending") == []

    def test_unknown_status_filter(self, service):
        with pytest.raises(ValidationError):
            service.list_applications(status="archived")


class TestOptimisticConcurrency:

    def test_stale_write_is_rejected(self, service, db, make_application):
        application = make_application("pending")
        stale = Application.model_validate(application.model_dump())

        service.advance_status(application.id, "reviewing")

        with pytest.raises(ConflictError):
            service.application_repo.save_changes(stale, {"status": "interview"})

        db.refresh(application)
        assert application.status == "reviewing"
        assert application.version == 2
