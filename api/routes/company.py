"""
Company and Job API Routes.

Endpoints:
- POST /companies - Register a company (waits for approval)
- GET /companies/{company_id} - Get a company
- POST /jobs - Create a job posting
- POST /jobs/generate - Draft a job advertisement with AI
- GET /jobs - List jobs (published by default)
- GET /jobs/{job_id} - Get a job
- PATCH /jobs/{job_id}/status - Publish, unpublish or close a job
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from api.auth import verify_api_key
from api.dependencies import get_company_service, get_job_service
from api.models.common_schemas import ERROR_RESPONSES
from api.models.job_schemas import (
    CompanyCreateRequest,
    CompanyResponse,
    JobCreateRequest,
    JobDescriptionRequest,
    JobDescriptionResponse,
    JobResponse,
    JobStatusRequest,
)
from services import CompanyService, JobService

company_router = APIRouter(
    prefix="/companies",
    tags=["Companies"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)

job_router = APIRouter(
    prefix="/jobs",
    tags=["Jobs"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


@company_router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def register_company(
    request: CompanyCreateRequest,
    service: CompanyService = Depends(get_company_service),
):
    """Register a company. Jobs can be created once an administrator approves it."""
    return service.register_company(**request.model_dump())


@company_router.get("/{company_id}", response_model=CompanyResponse)
def get_company(
    company_id: str,
    service: CompanyService = Depends(get_company_service),
):
    return service.get_company(company_id)


@job_router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    request: JobCreateRequest,
    service: JobService = Depends(get_job_service),
):
    return service.create_job(
        company_id=request.company_id,
        title=request.title,
        description=request.description,
        industry=request.industry,
        percentage=request.percentage,
        location=request.location,
        requirements=request.requirements,
        camera_required=request.camera_required.value,
        status=request.status.value,
    )


@job_router.post("/generate", response_model=JobDescriptionResponse)
def generate_job_description(
    request: JobDescriptionRequest,
    service: JobService = Depends(get_job_service),
):
    """Draft a markdown job advertisement. The text is returned, not saved."""
    description = service.generate_description(**request.model_dump())
    return JobDescriptionResponse(description=description)


@job_router.get("", response_model=List[JobResponse])
def list_jobs(
    company_id: Optional[str] = Query(default=None, description="Only jobs of this company"),
    status_filter: Optional[str] = Query(
        default="published", alias="status",
        description="Job status filter; pass an empty value for all statuses",
    ),
    industry: Optional[str] = Query(default=None),
    service: JobService = Depends(get_job_service),
):
    """List jobs, newest first. Without filters only published jobs are returned."""
    return service.list_jobs(company_id=company_id, status=status_filter or None, industry=industry)


@job_router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: str,
    service: JobService = Depends(get_job_service),
):
    return service.get_job(job_id)


@job_router.patch("/{job_id}/status", response_model=JobResponse)
def change_job_status(
    job_id: str,
    request: JobStatusRequest,
    service: JobService = Depends(get_job_service),
):
    """Move a job between draft, published and closed. Closed is final."""
    return service.change_status(job_id, request.status.value)
