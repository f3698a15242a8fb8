from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import datetime

from api.models.application_schemas import ApplicationResponse
from api.models.common_schemas import NotificationResponse


class RequestReferenceRequest(BaseModel):
    application_id: str = Field(..., min_length=1)
    referee_name: str = Field(..., min_length=1)
    referee_email: str = Field(..., min_length=3)


class ReferenceDetailResponse(BaseModel):
    id: str
    application_id: str
    referee_name: str
    referee_email: str
    response: Optional[Dict[str, Any]] = None
    sent_at: Optional[datetime] = None
    responded_at: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ReferenceRequestResponse(BaseModel):
    reference: ReferenceDetailResponse
    application: ApplicationResponse
    notification: NotificationResponse


class ReferenceFormResponse(BaseModel):
    """What the referee sees before answering."""
    reference_id: str
    referee_name: str
    candidate_name: str
    job_title: str
    company_name: str
    already_submitted: bool
