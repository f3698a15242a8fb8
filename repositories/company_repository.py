"""Company repository."""

from typing import List
from sqlmodel import Session, select

from models.company import Company
from repositories.base_repository import BaseRepository


class CompanyRepository(BaseRepository[Company]):

    def __init__(self, db_session: Session):
        super().__init__(db_session, Company)

    def list_pending_approval(self) -> List[Company]:
        """Companies waiting for an administrator, oldest first."""
        query = (
            select(Company)
            .where(Company.approved == False)  # noqa: E712
            .order_by(Company.created_at)
        )
        return list(self.db.exec(query).all())
