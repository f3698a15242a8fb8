"""
Shared fixtures.

Services run against an in-memory SQLite database; the reasoning and
notification facades are replaced by fakes so no provider is called.
"""

from typing import Any, Dict, List, Optional

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from models.ai_analysis import AIAnalysis
from models.application import Application
from models.candidate import Candidate
from models.company import Company
from models.job import Job, JobStatus
from services.notification_service import NotificationResult
from utils.database import create_db_and_tables
from utils.exceptions import UpstreamServiceError


class FakeReasoning:
    """Stand-in for ReasoningService with canned outputs and a call log."""

    def __init__(self):
        self.language = "Norwegian"
        self.questions = ["Hvorfor søker du?", "Når kan du starte?"]
        self.score: Any = 78
        self.analysis = AIAnalysis(
            summary="Erfaren kandidat",
            strengths=["Pasientkontakt"],
            areas_to_explore=["Nattevakter"],
        )
        self.reply = "Hei! Fortell litt om deg selv."
        self.summary = "Kandidaten svarte utfyllende."
        self.rejection_body = "Takk for din søknad."
        self.onboarding_body = "Velkommen til teamet!"
        self.job_description = "## Om stillingen\n- Hjemmebesøk"
        self.job_description_args: Dict[str, Any] = {}
        # name of the method that should raise UpstreamServiceError
        self.fail_on: Optional[str] = None
        self.calls: List[str] = []

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_on == name:
            raise UpstreamServiceError(f"{name} failed")

    def detect_language(self, text):
        self._record("detect_language")
        return self.language

    def generate_follow_up_questions(self, job, cv_text, language=None):
        self._record("generate_follow_up_questions")
        return list(self.questions)

    def score_candidate(self, job, candidate, cv_text, answers=None, session_id=None):
        self._record("score_candidate")
        return {"score": self.score, "reasoning": "Relevant erfaring"}

    def analyze_candidate(self, job, candidate, cv_text, answers=None, interview_transcript=None, session_id=None):
        self._record("analyze_candidate")
        return self.analysis

    def run_interview_turn(self, job, candidate, cv_text, conversation_history, language=None, session_id=None):
        self._record("run_interview_turn")
        return self.reply

    def summarize_interview(self, job, transcript, language=None, session_id=None):
        self._record("summarize_interview")
        return self.summary

    def generate_rejection_email(self, candidate_name, job_title, company_name, language=None):
        self._record("generate_rejection_email")
        return self.rejection_body

    def generate_onboarding_email(self, candidate_name, job_title, company_name, start_date, language=None):
        self._record("generate_onboarding_email")
        return self.onboarding_body

    def generate_job_description(self, **kwargs):
        self._record("generate_job_description")
        self.job_description_args = kwargs
        return self.job_description


class FakeNotifier:
    """Stand-in for NotificationService that records every email."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.sent: List[Dict[str, str]] = []

    def send_email(self, to, email):
        self.sent.append({"to": to, "subject": email.subject, "html": email.html})
        if self.succeed:
            return NotificationResult(success=True)
        return NotificationResult(success=False, error="Network error")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def reasoning():
    return FakeReasoning()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def company(db):
    company = Company(name="Bergen Omsorg AS", email="hr@bergenomsorg.no", approved=True)
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


@pytest.fixture
def job(db, company):
    job = Job(
        company_id=company.id,
        title="Helsefagarbeider",
        description="Fast stilling i hjemmetjenesten",
        industry="helse-og-omsorg",
        percentage=80,
        location="Bergen",
        status=JobStatus.PUBLISHED.value,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


@pytest.fixture
def candidate(db):
    candidate = Candidate(
        name="Kari Nordmann",
        email="kari@example.no",
        cv_text="6 år i hjemmetjenesten.",
        language="Norwegian",
    )
    db.add(candidate)
    db.commit()
    db.refresh(candidate)
    return candidate


@pytest.fixture
def make_application(db, job, candidate):
    """Insert an application directly in the given status."""

    def _make(status: str = "pending", **fields) -> Application:
        application = Application(
            job_id=job.id,
            candidate_id=candidate.id,
            status=status,
            follow_up_questions=["Hvorfor søker du?"],
            **fields,
        )
        db.add(application)
        db.commit()
        db.refresh(application)
        return application

    return _make
