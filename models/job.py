from datetime import datetime
from enum import Enum
from typing import Optional
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text


class JobStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CLOSED = "closed"


class CameraRequired(str, Enum):
    """Whether the candidate's camera is used during the AI interview."""
    DISABLED = "disabled"
    OPTIONAL = "optional"
    REQUIRED = "required"


class Job(SQLModel, table=True):
    """Job posting owned by a company."""
    __tablename__ = "jobs"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    company_id: str = Field(foreign_key="companies.id", index=True)

    title: str
    description: str = Field(default="", sa_column=Column(Text))
    industry: str = Field(default="annet")  # industry tag, e.g. "it-og-teknologi"
    percentage: int = Field(default=100)     # FTE percentage
    location: str = Field(default="")
    requirements: Optional[str] = Field(default=None, sa_column=Column(Text))

    status: str = Field(default=JobStatus.DRAFT.value, index=True)  # draft, published, closed
    camera_required: str = Field(default=CameraRequired.OPTIONAL.value)

    created_at: datetime = Field(default_factory=datetime.utcnow)
