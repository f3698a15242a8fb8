"""
Job Service - companies and their job postings.

Companies register and are approved by an administrator; rejecting a company
deletes it. Jobs move draft -> published -> closed, and closed is final.
"""

import logging
from typing import List, Optional

from sqlmodel import Session

from models.company import Company
from models.job import CameraRequired, Job, JobStatus
from repositories import CompanyRepository, JobRepository
from services.reasoning_service import ReasoningService
from utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

JOB_STATUS_TRANSITIONS = {
    JobStatus.DRAFT.value: {JobStatus.PUBLISHED.value, JobStatus.CLOSED.value},
    JobStatus.PUBLISHED.value: {JobStatus.DRAFT.value, JobStatus.CLOSED.value},
    JobStatus.CLOSED.value: set(),
}


class CompanyService:

    def __init__(self, db_session: Session):
        self.db = db_session
        self.company_repo = CompanyRepository(db_session)

    def register_company(
        self,
        name: str,
        email: str,
        website: Optional[str] = None,
        description: Optional[str] = None,
        logo: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> Company:
        name = (name or "").strip()
        email = (email or "").strip().lower()
        if not name:
            raise ValidationError("name is required")
        if "@" not in email:
            raise ValidationError("email must be a valid email address")

        company = self.company_repo.create(Company(
            name=name,
            email=email,
            website=website,
            description=description,
            logo=logo,
            user_id=user_id,
        ))
        logger.info(f"Company {company.id} registered, waiting for approval")
        return company

    def get_company(self, company_id: str) -> Company:
        company = self.company_repo.get_by_id(company_id)
        if not company:
            raise NotFoundError(f"Company {company_id} not found")
        return company

    def list_companies(self, pending_only: bool = False) -> List[Company]:
        if pending_only:
            return self.company_repo.list_pending_approval()
        return self.company_repo.get_all()

    def approve_company(self, company_id: str) -> Company:
        company = self.get_company(company_id)
        if company.approved:
            return company
        company.approved = True
        company = self.company_repo.update(company)
        logger.info(f"Company {company_id} approved")
        return company

    def reject_company(self, company_id: str) -> None:
        """
        Reject a company registration by deleting it.

        Raises:
            ValidationError: If the company is already approved
        """
        company = self.get_company(company_id)
        if company.approved:
            raise ValidationError("An approved company cannot be rejected")
        self.company_repo.delete(company)
        logger.info(f"Company {company_id} rejected and deleted")


class JobService:

    def __init__(self, db_session: Session, reasoning: Optional[ReasoningService] = None):
        self.db = db_session
        self.reasoning = reasoning
        self.company_repo = CompanyRepository(db_session)
        self.job_repo = JobRepository(db_session)

    def create_job(
        self,
        company_id: str,
        title: str,
        description: str = "",
        industry: str = "annet",
        percentage: int = 100,
        location: str = "",
        requirements: Optional[str] = None,
        camera_required: str = CameraRequired.OPTIONAL.value,
        status: str = JobStatus.DRAFT.value,
    ) -> Job:
        """
        Create a job posting for an approved company.

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: Unapproved company or invalid field values
        """
        company = self.company_repo.get_by_id(company_id)
        if not company:
            raise NotFoundError(f"Company {company_id} not found")
        if not company.approved:
            raise ValidationError("The company has not been approved yet")

        title = (title or "").strip()
        if not title:
            raise ValidationError("title is required")
        if not 1 <= percentage <= 100:
            raise ValidationError("percentage must be between 1 and 100")
        if camera_required not in {c.value for c in CameraRequired}:
            raise ValidationError(f"Unknown camera_required value: {camera_required}")
        if status not in (JobStatus.DRAFT.value, JobStatus.PUBLISHED.value):
            raise ValidationError("A new job must be draft or published")

        job = self.job_repo.create(Job(
            company_id=company_id,
            title=title,
            description=description or "",
            industry=industry,
            percentage=percentage,
            location=location or "",
            requirements=requirements,
            camera_required=camera_required,
            status=status,
        ))
        logger.info(f"Job {job.id} created for company {company_id} ({status})")
        return job

    def generate_description(
        self,
        title: str,
        industry: str,
        percentage: int,
        location: str,
        requirements: str = "",
        keywords: Optional[str] = None,
        company_id: Optional[str] = None,
    ) -> str:
        """
        Draft a job advertisement with AI. Nothing is saved; the company
        edits the text and submits it through create_job.

        Raises:
            ValidationError: Missing title, industry, percentage or location
            NotFoundError: If company_id is given but unknown
            UpstreamServiceError: If generation fails
        """
        title = (title or "").strip()
        location = (location or "").strip()
        if not title or not industry or not location or not percentage:
            raise ValidationError("title, industry, percentage and location are required")
        if not 1 <= percentage <= 100:
            raise ValidationError("percentage must be between 1 and 100")
        if self.reasoning is None:
            raise RuntimeError("JobService was created without a reasoning service")

        company_name = None
        if company_id:
            company = self.company_repo.get_by_id(company_id)
            if not company:
                raise NotFoundError(f"Company {company_id} not found")
            company_name = company.name

        description = self.reasoning.generate_job_description(
            title=title,
            industry=industry,
            percentage=percentage,
            location=location,
            requirements=requirements or "",
            keywords=keywords,
            company_name=company_name,
        )
        logger.info(f"Generated job description for '{title}' ({len(description)} chars)")
        return description.strip()

    def get_job(self, job_id: str) -> Job:
        job = self.job_repo.get_by_id(job_id)
        if not job:
            raise NotFoundError(f"Job {job_id} not found")
        return job

    def list_jobs(
        self,
        company_id: Optional[str] = None,
        status: Optional[str] = JobStatus.PUBLISHED.value,
        industry: Optional[str] = None,
    ) -> List[Job]:
        return self.job_repo.list_jobs(company_id=company_id, status=status, industry=industry)

    def change_status(self, job_id: str, status: str) -> Job:
        """
        Move a job between draft, published and closed.

        Raises:
            ValidationError: Unknown status or a move out of closed
        """
        if status not in JOB_STATUS_TRANSITIONS:
            raise ValidationError(f"Unknown job status: {status}")

        job = self.get_job(job_id)
        if status == job.status:
            return job
        if status not in JOB_STATUS_TRANSITIONS[job.status]:
            raise ValidationError(f"Cannot change job status from {job.status} to {status}")

        job.status = status
        job = self.job_repo.update(job)
        logger.info(f"Job {job_id} is now {status}")
        return job
