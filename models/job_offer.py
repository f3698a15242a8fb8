from datetime import date, datetime
from enum import Enum
from typing import Optional
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text


class OfferStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class JobOffer(SQLModel, table=True):
    """Offer sent by the company; accepted or declined by the candidate."""
    __tablename__ = "job_offers"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    # One offer per application
    application_id: str = Field(foreign_key="applications.id", unique=True, index=True)

    start_date: date
    salary: Optional[str] = None
    benefits: Optional[str] = Field(default=None, sa_column=Column(Text))
    message: Optional[str] = Field(default=None, sa_column=Column(Text))

    status: str = Field(default=OfferStatus.PENDING.value)  # pending, accepted, declined
    signed_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
