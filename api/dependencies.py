"""
FastAPI dependency providers.

Routes receive fully wired services from here; tests override
get_reasoning_service / get_notification_service with fakes.
"""

from functools import lru_cache

from fastapi import Depends
from sqlmodel import Session

from services import (
    ApplicationService,
    CandidateService,
    CompanyService,
    InterviewService,
    JobService,
    MessageService,
    NotificationService,
    OfferService,
    ReasoningService,
    ReferenceService,
)
from utils.database import get_db


@lru_cache()
def get_reasoning_service() -> ReasoningService:
    """Process-wide reasoning facade (stateless, models created lazily)."""
    return ReasoningService()


@lru_cache()
def get_notification_service() -> NotificationService:
    return NotificationService()


def get_application_service(
    db: Session = Depends(get_db),
    reasoning: ReasoningService = Depends(get_reasoning_service),
    notifier: NotificationService = Depends(get_notification_service),
) -> ApplicationService:
    return ApplicationService(db, reasoning, notifier)


def get_interview_service(
    db: Session = Depends(get_db),
    reasoning: ReasoningService = Depends(get_reasoning_service),
) -> InterviewService:
    return InterviewService(db, reasoning)


def get_offer_service(
    db: Session = Depends(get_db),
    reasoning: ReasoningService = Depends(get_reasoning_service),
    notifier: NotificationService = Depends(get_notification_service),
) -> OfferService:
    return OfferService(db, reasoning, notifier)


def get_reference_service(
    db: Session = Depends(get_db),
    notifier: NotificationService = Depends(get_notification_service),
) -> ReferenceService:
    return ReferenceService(db, notifier)


def get_message_service(db: Session = Depends(get_db)) -> MessageService:
    return MessageService(db)


def get_candidate_service(
    db: Session = Depends(get_db),
    reasoning: ReasoningService = Depends(get_reasoning_service),
) -> CandidateService:
    return CandidateService(db, reasoning)


def get_company_service(db: Session = Depends(get_db)) -> CompanyService:
    return CompanyService(db)


def get_job_service(
    db: Session = Depends(get_db),
    reasoning: ReasoningService = Depends(get_reasoning_service),
) -> JobService:
    return JobService(db, reasoning)
