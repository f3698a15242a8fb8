"""
Candidate API Routes.

Endpoints:
- POST /candidates - Register a candidate
- GET /candidates/{candidate_id} - Get a candidate profile
- PATCH /candidates/{candidate_id} - Update profile fields
- PUT /candidates/{candidate_id}/cv - Upload CV text (re-detects language)
"""

from fastapi import APIRouter, Depends, status

from api.auth import verify_api_key
from api.dependencies import get_candidate_service
from api.models.candidate_schemas import (
    CandidateCreateRequest,
    CandidateResponse,
    CandidateUpdateRequest,
    CVUploadRequest,
)
from api.models.common_schemas import ERROR_RESPONSES
from services import CandidateService

router = APIRouter(
    prefix="/candidates",
    tags=["Candidates"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


@router.post("", response_model=CandidateResponse, status_code=status.HTTP_201_CREATED)
def register_candidate(
    request: CandidateCreateRequest,
    service: CandidateService = Depends(get_candidate_service),
):
    """Register a new candidate profile."""
    candidate = service.register_candidate(
        name=request.name,
        email=request.email,
        phone=request.phone,
        user_id=request.user_id,
    )
    return CandidateResponse.from_candidate(candidate)


@router.get("/{candidate_id}", response_model=CandidateResponse)
def get_candidate(
    candidate_id: str,
    service: CandidateService = Depends(get_candidate_service),
):
    return CandidateResponse.from_candidate(service.get_candidate(candidate_id))


@router.patch("/{candidate_id}", response_model=CandidateResponse)
def update_candidate(
    candidate_id: str,
    request: CandidateUpdateRequest,
    service: CandidateService = Depends(get_candidate_service),
):
    """Update profile fields. Only the fields present in the body are changed."""
    candidate = service.update_profile(candidate_id, request.model_dump(exclude_unset=True))
    return CandidateResponse.from_candidate(candidate)


@router.put("/{candidate_id}/cv", response_model=CandidateResponse)
def upload_cv(
    candidate_id: str,
    request: CVUploadRequest,
    service: CandidateService = Depends(get_candidate_service),
):
    """
    Replace the candidate's CV.

    The CV language is detected again and used for all generated text
    (follow-up questions, interview, emails).
    """
    candidate = service.upload_cv(candidate_id, request.cv_text, request.cv_url)
    return CandidateResponse.from_candidate(candidate)
