from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text, JSON, UniqueConstraint


class ApplicationStatus(str, Enum):
    """Hiring pipeline status of an application."""
    PENDING = "pending"
    REVIEWING = "reviewing"
    INTERVIEW = "interview"
    REFERENCE_CHECK = "reference_check"
    OFFER_SENT = "offer_sent"
    HIRED = "hired"
    REJECTED = "rejected"


TERMINAL_STATUSES = frozenset({ApplicationStatus.HIRED, ApplicationStatus.REJECTED})


class Application(SQLModel, table=True):
    """
    One candidate's application to one job.

    Aggregate root for follow-up Q&A, scoring, AI analysis and the interview
    transcript. There is no separate interview session: the interview state
    is `interview_transcript` + `interview_completed`.

    JSON fields:

    follow_up_answers:
        {"<question text>": "<answer text>", ...}

    ai_analysis:
    {
        "summary": "Two or three sentences",
        "strengths": ["..."],
        "areasToExplore": ["..."],
        "suggestedQuestions": ["..."],
        "redFlags": ["..."]
    }

    interview_transcript:
        [{"role": "assistant" | "user", "content": "...", "timestamp": "ISO-8601"}, ...]

    `version` is bumped on every write; writes are conditional on the version
    that was read (see ApplicationRepository.save_changes).
    """
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "candidate_id", name="uq_applications_job_candidate"),
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    job_id: str = Field(foreign_key="jobs.id", index=True)
    candidate_id: str = Field(foreign_key="candidates.id", index=True)

    status: str = Field(default=ApplicationStatus.PENDING.value, index=True)
    cover_letter: Optional[str] = Field(default=None, sa_column=Column(Text))

    # Follow-up Q&A gathered before review
    follow_up_questions: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    follow_up_answers: Optional[Dict[str, str]] = Field(default=None, sa_column=Column(JSON))

    # Scoring
    score: Optional[int] = Field(default=None, index=True)
    scoring_reasoning: Optional[str] = Field(default=None, sa_column=Column(Text))
    ai_analysis: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))

    # Interview
    interview_transcript: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    interview_summary: Optional[str] = Field(default=None, sa_column=Column(Text))
    interview_completed: bool = Field(default=False)
    recording_url: Optional[str] = None

    rejection_sent: bool = Field(default=False)

    version: int = Field(default=1)
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
