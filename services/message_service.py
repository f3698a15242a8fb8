"""
Message Service - company/candidate chat per application.

Chat is independent of the pipeline status.
"""

import logging
from typing import List

from sqlmodel import Session

from models.message import Message, SenderRole
from repositories import ApplicationRepository, MessageRepository
from utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 5000


def _parse_role(role: str) -> SenderRole:
    try:
        return SenderRole(role)
    except ValueError:
        raise ValidationError(f"sender_role must be 'company' or 'candidate', got '{role}'")


class MessageService:

    def __init__(self, db_session: Session):
        self.db = db_session
        self.application_repo = ApplicationRepository(db_session)
        self.message_repo = MessageRepository(db_session)

    def _ensure_application(self, application_id: str) -> None:
        if not self.application_repo.exists(application_id):
            raise NotFoundError(f"Application {application_id} not found")

    def list_messages(self, application_id: str) -> List[Message]:
        self._ensure_application(application_id)
        return self.message_repo.get_by_application(application_id)

    def post_message(self, application_id: str, sender_role: str, content: str) -> Message:
        """
        Add a chat message.

        Raises:
            NotFoundError: If the application does not exist
            ValidationError: Unknown role, empty or oversized content
        """
        role = _parse_role(sender_role)
        content = (content or "").strip()
        if not content:
            raise ValidationError("Message content is required")
        if len(content) > MAX_MESSAGE_LENGTH:
            raise ValidationError(f"Message is longer than {MAX_MESSAGE_LENGTH} characters")

        self._ensure_application(application_id)
        return self.message_repo.create(
            Message(application_id=application_id, sender_role=role.value, content=content)
        )

    def mark_read(self, application_id: str, reader_role: str) -> int:
        """
        Mark the other party's unread messages as read.

        Args:
            application_id: Application ID
            reader_role: Role of the reader ("company" or "candidate")

        Returns:
            Number of messages marked read
        """
        reader = _parse_role(reader_role)
        self._ensure_application(application_id)

        other = SenderRole.CANDIDATE if reader == SenderRole.COMPANY else SenderRole.COMPANY
        count = self.message_repo.mark_read(application_id, other.value)
        logger.debug(f"{reader.value} read {count} messages on application {application_id}")
        return count

    def count_unread(self, application_id: str, reader_role: str) -> int:
        """Unread messages from the other party, for the reader's badge."""
        reader = _parse_role(reader_role)
        self._ensure_application(application_id)
        other = SenderRole.CANDIDATE if reader == SenderRole.COMPANY else SenderRole.COMPANY
        return self.message_repo.count_unread(application_id, other.value)
