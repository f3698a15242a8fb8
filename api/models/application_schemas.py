from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime

from api.models.common_schemas import NotificationResponse


class SubmitApplicationRequest(BaseModel):
    """Schema for applying to a job"""
    job_id: str = Field(..., min_length=1)
    candidate_id: str = Field(..., min_length=1)
    cv_text: str = Field(..., min_length=1, description="CV text extracted from the uploaded file")
    cv_url: Optional[str] = None
    cover_letter: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "job_id": "5b9e6d1a-2f3c-4e5d-8a7b-6c5d4e3f2a1b",
                "candidate_id": "2eb2aa03-ec75-426f-8db9-8c25901eea2c",
                "cv_text": "Kari Nordmann\nSystemutvikler\n\nERFARING:\n- 4 år med Python og Django...",
                "cover_letter": "Jeg søker stillingen fordi..."
            }
        }


class SubmitAnswersRequest(BaseModel):
    answers: Dict[str, str] = Field(..., description="Answer text keyed by follow-up question")

    class Config:
        json_schema_extra = {
            "example": {
                "answers": {
                    "The position is 100%. How does that fit with your studies?": "I finish my degree in May.",
                    "What draws you to backend work?": "I enjoy designing APIs."
                }
            }
        }


class AdvanceStatusRequest(BaseModel):
    status: str = Field(..., description="Target status: 'reviewing' or 'interview'")


class RecordingRequest(BaseModel):
    recording_url: str = Field(..., min_length=1)


class RawUpdateRequest(BaseModel):
    """Administrator field update; bypasses lifecycle rules and is audited."""
    fields: Dict[str, Any] = Field(..., description="Column name -> new value")

    class Config:
        json_schema_extra = {
            "example": {"fields": {"status": "reviewing", "score": 72}}
        }


class ApplicationResponse(BaseModel):
    id: str
    job_id: str
    candidate_id: str
    status: str
    cover_letter: Optional[str] = None
    follow_up_questions: List[str] = []
    follow_up_answers: Optional[Dict[str, str]] = None
    score: Optional[int] = None
    scoring_reasoning: Optional[str] = None
    ai_analysis: Optional[Dict[str, Any]] = None
    interview_transcript: List[Dict[str, Any]] = []
    interview_summary: Optional[str] = None
    interview_completed: bool
    recording_url: Optional[str] = None
    rejection_sent: bool
    version: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RejectApplicationResponse(BaseModel):
    application: ApplicationResponse
    notification: NotificationResponse


class ApplicationEventResponse(BaseModel):
    id: str
    application_id: str
    action: str
    from_status: Optional[str] = None
    to_status: Optional[str] = None
    actor: str
    detail: Dict[str, Any] = {}
    created_at: datetime

    class Config:
        from_attributes = True
