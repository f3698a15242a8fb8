"""
Message repository for company/candidate chat.

Handles CRUD operations for the messages table.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from models.message import Message
from repositories.base_repository import BaseRepository
from utils.exceptions import PersistenceError


class MessageRepository(BaseRepository[Message]):
    """Repository for managing chat messages."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Message)

    def get_by_application(
        self,
        application_id: str,
        sender_role: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[Message]:
        """
        Get all messages for an application.

        Args:
            application_id: Application ID
            sender_role: Optional filter by sender ("company" or "candidate")
            limit: Optional limit number of messages

        Returns:
            List of messages ordered by created_at
        """
        query = select(Message).where(Message.application_id == application_id)

        if sender_role:
            query = query.where(Message.sender_role == sender_role)

        query = query.order_by(Message.created_at)

        if limit:
            query = query.limit(limit)

        return list(self.db.exec(query).all())

    def count_unread(self, application_id: str, sender_role: str) -> int:
        """
        Count unread messages sent by `sender_role`.

        Args:
            application_id: Application ID
            sender_role: Role whose unread messages are counted

        Returns:
            Number of messages without read_at
        """
        query = select(Message).where(
            Message.application_id == application_id,
            Message.sender_role == sender_role,
            Message.read_at.is_(None),
        )
        return len(self.db.exec(query).all())

    def mark_read(self, application_id: str, sender_role: str) -> int:
        """
        Mark every unread message sent by `sender_role` as read.

        Args:
            application_id: Application ID
            sender_role: Role whose messages the reader has now seen

        Returns:
            Number of messages marked read
        """
        statement = (
            update(Message)
            .where(Message.application_id == application_id)
            .where(Message.sender_role == sender_role)
            .where(Message.read_at.is_(None))
            .values(read_at=datetime.utcnow())
        )
        try:
            result = self.db.execute(statement)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to mark messages read: {e}") from e
        return result.rowcount
