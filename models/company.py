from datetime import datetime
from typing import Optional
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text


class Company(SQLModel, table=True):
    """Hiring company. Jobs are owned by a company; approval is done by an administrator."""
    __tablename__ = "companies"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: Optional[str] = Field(default=None, index=True)
    name: str
    email: str
    logo: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    approved: bool = Field(default=False)
    created_at: datetime = Field(default_factory=datetime.utcnow)
