from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

from api.models.application_schemas import ApplicationResponse
from api.models.common_schemas import NotificationResponse


class SendOfferRequest(BaseModel):
    application_id: str = Field(..., min_length=1)
    start_date: date
    salary: Optional[str] = None
    benefits: Optional[str] = None
    message: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "application_id": "9a8b7c6d-5e4f-3a2b-1c0d-9e8f7a6b5c4d",
                "start_date": "2025-08-01",
                "salary": "650 000 NOK",
                "benefits": "Pension, insurance, flexible hours",
                "message": "We would love to have you on the team!"
            }
        }


class OfferResponse(BaseModel):
    id: str
    application_id: str
    start_date: date
    salary: Optional[str] = None
    benefits: Optional[str] = None
    message: Optional[str] = None
    status: str
    signed_at: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class OfferDetailsResponse(BaseModel):
    offer: OfferResponse
    candidate_name: str
    job_title: str
    company_name: str


class OfferActionResponse(BaseModel):
    offer: OfferResponse
    application: ApplicationResponse
    notification: NotificationResponse
