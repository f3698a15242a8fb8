"""
Reference API Routes.

Endpoints:
- POST /references - Request a reference (application -> reference_check)
- GET /references/{reference_id} - Referee view of the request
- POST /references/{reference_id}/response - Submit the referee's answers (once)
"""

from fastapi import APIRouter, Depends, status

from api.auth import verify_api_key
from api.dependencies import get_reference_service
from api.models.application_schemas import ApplicationResponse
from api.models.common_schemas import ERROR_RESPONSES, NotificationResponse
from api.models.reference_schemas import (
    ReferenceDetailResponse,
    ReferenceFormResponse,
    ReferenceRequestResponse,
    RequestReferenceRequest,
)
from models.reference import ReferenceResponse
from services import ReferenceService

router = APIRouter(
    prefix="/references",
    tags=["References"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


@router.post("", response_model=ReferenceRequestResponse, status_code=status.HTTP_201_CREATED)
def request_reference(
    request: RequestReferenceRequest,
    service: ReferenceService = Depends(get_reference_service),
):
    """Ask a referee to fill in the reference form. One reference per application."""
    result = service.request_reference(
        application_id=request.application_id,
        referee_name=request.referee_name,
        referee_email=request.referee_email,
    )
    return ReferenceRequestResponse(
        reference=ReferenceDetailResponse.model_validate(result["reference"]),
        application=ApplicationResponse.model_validate(result["application"]),
        notification=NotificationResponse.model_validate(result["notification"]),
    )


@router.get("/{reference_id}", response_model=ReferenceFormResponse)
def get_reference_form(
    reference_id: str,
    service: ReferenceService = Depends(get_reference_service),
):
    form = service.get_reference_form(reference_id)
    reference = form["reference"]
    return ReferenceFormResponse(
        reference_id=reference.id,
        referee_name=reference.referee_name,
        candidate_name=form["candidate_name"],
        job_title=form["job_title"],
        company_name=form["company_name"],
        already_submitted=reference.response is not None,
    )


@router.post("/{reference_id}/response", response_model=ReferenceDetailResponse)
def submit_reference_response(
    reference_id: str,
    request: ReferenceResponse,
    service: ReferenceService = Depends(get_reference_service),
):
    """Store the referee's answers. A second submission is rejected."""
    return service.submit_response(reference_id, request)
