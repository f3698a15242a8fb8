"""
Services module - Business Logic Layer.

Contains application services that orchestrate business logic,
sitting between the API layer (routes) and the data layer (repositories).

Services handle:
- Lifecycle validation (via the pure planners in pipeline/)
- Orchestrating multiple repository operations
- Coordinating with external services (reasoning, email)
- Transaction management

Usage:
    from services import ApplicationService

    service = ApplicationService(db_session, reasoning, notifier)
    application = service.submit_follow_up_answers(application_id, answers)
"""

from services.reasoning_service import ReasoningService
from services.notification_service import NotificationService, NotificationResult
from services.scoring_gate import ScoringGate, GateResult
from services.application_service import ApplicationService
from services.interview_service import InterviewService
from services.offer_service import OfferService
from services.reference_service import ReferenceService
from services.message_service import MessageService
from services.candidate_service import CandidateService
from services.job_service import CompanyService, JobService

__all__ = [
    "ReasoningService",
    "NotificationService",
    "NotificationResult",
    "ScoringGate",
    "GateResult",
    "ApplicationService",
    "InterviewService",
    "OfferService",
    "ReferenceService",
    "MessageService",
    "CandidateService",
    "CompanyService",
    "JobService",
]
