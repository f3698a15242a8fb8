"""Application event repository (audit trail, read side)."""

from typing import List
from sqlmodel import Session, select

from models.application_event import ApplicationEvent
from repositories.base_repository import BaseRepository


class ApplicationEventRepository(BaseRepository[ApplicationEvent]):

    def __init__(self, db_session: Session):
        super().__init__(db_session, ApplicationEvent)

    def get_by_application(self, application_id: str) -> List[ApplicationEvent]:
        """Events of one application in the order they happened."""
        query = (
            select(ApplicationEvent)
            .where(ApplicationEvent.application_id == application_id)
            .order_by(ApplicationEvent.created_at)
        )
        return list(self.db.exec(query).all())
