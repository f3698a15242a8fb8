from datetime import datetime
from typing import Optional
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text


class Candidate(SQLModel, table=True):
    """
    Job seeker profile.

    CV fields (cv_url, cv_text, language) are overwritten on every CV upload;
    `language` holds the detected language name (e.g. "Norwegian").
    """
    __tablename__ = "candidates"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: Optional[str] = Field(default=None, index=True)
    name: str
    email: str = Field(index=True)
    phone: Optional[str] = None

    # CV data
    cv_url: Optional[str] = None
    cv_text: Optional[str] = Field(default=None, sa_column=Column(Text))
    language: Optional[str] = None

    # Profile fields
    bio: Optional[str] = Field(default=None, sa_column=Column(Text))
    skills: Optional[str] = None
    linkedin_url: Optional[str] = None
    profile_picture_url: Optional[str] = None

    created_at: datetime = Field(default_factory=datetime.utcnow)
