"""
Candidate repository for candidate persistence.

Provides convenience methods around `Candidate` using `BaseRepository`.
"""

from typing import Optional
from sqlmodel import Session, select

from models.candidate import Candidate
from repositories.base_repository import BaseRepository


class CandidateRepository(BaseRepository[Candidate]):
    """Repository for managing candidates."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Candidate)

    def get_by_email(self, email: str) -> Optional[Candidate]:
        """
        Find candidate by email.

        Args:
            email: Candidate email

        Returns:
            Candidate or None
        """
        if not email:
            return None
        query = select(Candidate).where(Candidate.email == email)
        return self.db.exec(query).first()
