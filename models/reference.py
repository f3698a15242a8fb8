from datetime import datetime
from typing import Optional, Dict, Any
import uuid

from pydantic import BaseModel, Field as PydanticField
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON


class ReferenceResponse(BaseModel):
    """Referee's answers to the reference form."""
    relationship: str = PydanticField(..., min_length=1)
    duration: str = PydanticField(..., min_length=1)
    strengths: str = PydanticField(..., min_length=1)
    concerns: Optional[str] = None
    rehire: bool
    rating: int = PydanticField(..., ge=1, le=5)
    comments: Optional[str] = None


class Reference(SQLModel, table=True):
    """
    Reference check requested by the company and answered once by the referee.

    Response structure (JSON field), see ReferenceResponse:
    {
        "relationship": "Former manager",
        "duration": "3 years",
        "strengths": "...",
        "concerns": "...",          # optional
        "rehire": true,
        "rating": 1-5,
        "comments": "..."           # optional
    }
    """
    __tablename__ = "job_references"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    application_id: str = Field(foreign_key="applications.id", index=True)

    referee_name: str
    referee_email: str

    response: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))

    # Set once the request email has been delivered
    sent_at: Optional[datetime] = None
    responded_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
