"""
Loading of an application together with the records every action needs.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from sqlmodel import Session

from models.application import Application
from models.application_event import ApplicationEvent
from models.candidate import Candidate
from models.company import Company
from models.job import Job
from pipeline.transitions import TransitionPlan
from utils.exceptions import NotFoundError


@dataclass
class ApplicationContext:
    application: Application
    candidate: Candidate
    job: Job
    company: Company

    @property
    def cv_text(self) -> str:
        return self.candidate.cv_text or ""


def load_application_context(db: Session, application_id: str) -> ApplicationContext:
    """
    Load an application with its candidate, job and company.

    Raises:
        NotFoundError: If any of the records is missing
    """
    application = db.get(Application, application_id)
    if not application:
        raise NotFoundError(f"Application {application_id} not found")

    candidate = db.get(Candidate, application.candidate_id)
    if not candidate:
        raise NotFoundError(f"Candidate {application.candidate_id} not found")

    job = db.get(Job, application.job_id)
    if not job:
        raise NotFoundError(f"Job {application.job_id} not found")

    company = db.get(Company, job.company_id)
    if not company:
        raise NotFoundError(f"Company {job.company_id} not found")

    return ApplicationContext(application=application, candidate=candidate, job=job, company=company)


def transition_event(
    application_id: str,
    plan: TransitionPlan,
    actor: str,
    detail: Optional[Dict[str, Any]] = None,
) -> ApplicationEvent:
    """Audit event for a planned lifecycle transition."""
    return ApplicationEvent(
        application_id=application_id,
        action=plan.action.value,
        from_status=plan.from_status.value,
        to_status=plan.to_status.value,
        actor=actor,
        detail=detail or {},
    )
