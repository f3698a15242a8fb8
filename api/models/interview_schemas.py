from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from api.models.application_schemas import ApplicationResponse


class InterviewTurnRequest(BaseModel):
    """Schema for one interview turn"""
    message: Optional[str] = Field(
        default=None,
        description="Candidate's answer. Omit on the first call to open the interview."
    )

    class Config:
        json_schema_extra = {
            "example": {
                "message": "I have worked with Python for four years, mostly on REST APIs."
            }
        }


class InterviewMessageResponse(BaseModel):
    role: str
    content: str
    timestamp: datetime


class InterviewTurnResponse(BaseModel):
    message: str = Field(..., description="Interviewer's reply; empty on the completing turn")
    completed: bool
    user_turns: int
    transcript: List[InterviewMessageResponse]
    application: ApplicationResponse

    class Config:
        json_schema_extra = {
            "example": {
                "message": "Thank you. Can you tell me about a project you are proud of?",
                "completed": False,
                "user_turns": 1,
                "transcript": [
                    {"role": "assistant", "content": "Welcome! What motivates you to apply?", "timestamp": "2025-01-01T10:00:00"},
                    {"role": "user", "content": "I like the product.", "timestamp": "2025-01-01T10:00:30"},
                    {"role": "assistant", "content": "Thank you. Can you tell me about a project you are proud of?", "timestamp": "2025-01-01T10:00:32"}
                ]
            }
        }


class InterviewStateResponse(BaseModel):
    application_id: str
    job_title: str
    camera_required: str
    interview_completed: bool
    status: str
    user_turns: int
    max_user_turns: int
    transcript: List[InterviewMessageResponse]
