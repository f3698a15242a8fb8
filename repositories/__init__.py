"""
Repositories module - Data Access Layer.

Provides repository classes for database operations following the Repository pattern.
Each repository handles CRUD operations for a specific domain entity.

Usage:
    from repositories import ApplicationRepository, MessageRepository

    # Initialize with a database session
    application_repo = ApplicationRepository(db_session)
    message_repo = MessageRepository(db_session)

    # Use repository methods
    application = application_repo.get_by_id(application_id)
    messages = message_repo.get_by_application(application_id)
"""

from repositories.base_repository import BaseRepository
from repositories.application_repository import ApplicationRepository
from repositories.application_event_repository import ApplicationEventRepository
from repositories.candidate_repository import CandidateRepository
from repositories.company_repository import CompanyRepository
from repositories.job_repository import JobRepository
from repositories.job_offer_repository import JobOfferRepository
from repositories.reference_repository import ReferenceRepository
from repositories.message_repository import MessageRepository

__all__ = [
    "BaseRepository",
    "ApplicationRepository",
    "ApplicationEventRepository",
    "CandidateRepository",
    "CompanyRepository",
    "JobRepository",
    "JobOfferRepository",
    "ReferenceRepository",
    "MessageRepository",
]
