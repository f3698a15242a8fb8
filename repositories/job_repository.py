"""Job repository."""

from typing import List, Optional
from sqlmodel import Session, select

from models.job import Job
from repositories.base_repository import BaseRepository


class JobRepository(BaseRepository[Job]):

    def __init__(self, db_session: Session):
        super().__init__(db_session, Job)

    def list_jobs(
        self,
        company_id: Optional[str] = None,
        status: Optional[str] = None,
        industry: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Job]:
        """
        List jobs, newest first.

        Args:
            company_id: Only jobs of this company
            status: Only jobs in this status (e.g. "published")
            industry: Only jobs with this industry tag
            limit: Maximum number of results
            offset: Number of records to skip
        """
        query = select(Job)
        if company_id:
            query = query.where(Job.company_id == company_id)
        if status:
            query = query.where(Job.status == status)
        if industry:
            query = query.where(Job.industry == industry)
        query = query.order_by(Job.created_at.desc()).offset(offset).limit(limit)
        return list(self.db.exec(query).all())
