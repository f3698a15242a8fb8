"""Reference repository."""

from typing import List
from sqlmodel import Session, select

from models.reference import Reference
from repositories.base_repository import BaseRepository


class ReferenceRepository(BaseRepository[Reference]):

    def __init__(self, db_session: Session):
        super().__init__(db_session, Reference)

    def get_by_application(self, application_id: str) -> List[Reference]:
        query = (
            select(Reference)
            .where(Reference.application_id == application_id)
            .order_by(Reference.created_at)
        )
        return list(self.db.exec(query).all())
