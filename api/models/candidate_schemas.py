from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class CandidateCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: Optional[str] = None
    user_id: Optional[str] = Field(default=None, description="External auth user id")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Kari Nordmann",
                "email": "kari@example.no",
                "phone": "+47 900 00 000"
            }
        }


class CandidateUpdateRequest(BaseModel):
    """Editable profile fields; omitted fields are left unchanged."""
    name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[str] = None
    linkedin_url: Optional[str] = None
    profile_picture_url: Optional[str] = None


class CVUploadRequest(BaseModel):
    """Request body for uploading a candidate CV (already extracted to text)."""
    cv_text: str = Field(..., min_length=1, description="Full CV text")
    cv_url: Optional[str] = Field(default=None, description="Where the original file is stored")


class CandidateResponse(BaseModel):
    id: str
    user_id: Optional[str] = None
    name: str
    email: str
    phone: Optional[str] = None
    cv_url: Optional[str] = None
    language: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[str] = None
    linkedin_url: Optional[str] = None
    profile_picture_url: Optional[str] = None
    has_cv: bool = False
    created_at: datetime

    class Config:
        from_attributes = True

    @classmethod
    def from_candidate(cls, candidate) -> "CandidateResponse":
        response = cls.model_validate(candidate)
        response.has_cv = bool(candidate.cv_text)
        return response
