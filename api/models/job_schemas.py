from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from models.job import CameraRequired, JobStatus


class CompanyCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    website: Optional[str] = None
    description: Optional[str] = None
    logo: Optional[str] = None
    user_id: Optional[str] = None


class CompanyResponse(BaseModel):
    id: str
    name: str
    email: str
    website: Optional[str] = None
    description: Optional[str] = None
    logo: Optional[str] = None
    approved: bool
    created_at: datetime

    class Config:
        from_attributes = True


class JobCreateRequest(BaseModel):
    company_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = ""
    industry: str = Field(default="annet", description="Industry tag, e.g. 'it-og-teknologi'")
    percentage: int = Field(default=100, ge=1, le=100, description="FTE percentage")
    location: str = ""
    requirements: Optional[str] = None
    camera_required: CameraRequired = CameraRequired.OPTIONAL
    status: JobStatus = JobStatus.DRAFT

    class Config:
        json_schema_extra = {
            "example": {
                "company_id": "0d3c8f7e-5a1b-4c2d-9e8f-7a6b5c4d3e2f",
                "title": "Backend Developer",
                "description": "We are looking for a backend developer to join our platform team.",
                "industry": "it-og-teknologi",
                "percentage": 100,
                "location": "Oslo",
                "camera_required": "optional",
                "status": "published"
            }
        }


class JobStatusRequest(BaseModel):
    status: JobStatus


class JobDescriptionRequest(BaseModel):
    title: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1)
    percentage: int = Field(..., ge=1, le=100)
    location: str = Field(..., min_length=1)
    requirements: str = ""
    keywords: Optional[str] = None
    company_id: Optional[str] = Field(default=None, description="Adds the company name to the ad")

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Helsefagarbeider",
                "industry": "helse-og-omsorg",
                "percentage": 80,
                "location": "Bergen",
                "requirements": "Autorisasjon som helsefagarbeider, førerkort klasse B",
                "keywords": "hjemmetjenesten, turnus"
            }
        }


class JobDescriptionResponse(BaseModel):
    description: str


class JobResponse(BaseModel):
    id: str
    company_id: str
    title: str
    description: str
    industry: str
    percentage: int
    location: str
    requirements: Optional[str] = None
    status: str
    camera_required: str
    created_at: datetime

    class Config:
        from_attributes = True
