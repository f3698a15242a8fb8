"""Job offer repository. One offer per application."""

from typing import Optional
from sqlmodel import Session, select

from models.job_offer import JobOffer
from repositories.base_repository import BaseRepository


class JobOfferRepository(BaseRepository[JobOffer]):

    def __init__(self, db_session: Session):
        super().__init__(db_session, JobOffer)

    def get_by_application(self, application_id: str) -> Optional[JobOffer]:
        query = select(JobOffer).where(JobOffer.application_id == application_id)
        return self.db.exec(query).first()
