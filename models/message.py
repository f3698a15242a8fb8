"""
Message model for the company/candidate chat attached to an application.

Chat is independent of the application status: messages can be exchanged
at any point in the pipeline.
"""

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text
from datetime import datetime
from enum import Enum
from typing import Optional
import uuid


class SenderRole(str, Enum):
    COMPANY = "company"
    CANDIDATE = "candidate"


class Message(SQLModel, table=True):
    """Chat message between the company and the candidate of one application."""
    __tablename__ = "messages"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)

    application_id: str = Field(foreign_key="applications.id", index=True)

    sender_role: str = Field(index=True)  # "company" | "candidate"

    content: str = Field(sa_column=Column(Text))

    # Set when the other party has seen the message
    read_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
