"""
Application API Routes - Thin Controller Layer.

Handles HTTP concerns and delegates the pipeline lifecycle to
ApplicationService. Domain errors are rendered by the handlers in api/main.py.

Endpoints:
- POST /applications - Apply for a job
- GET /applications - List applications (by candidate, job or company)
- GET /applications/{id} - Get an application
- POST /applications/{id}/answers - Submit follow-up answers (scores the candidate)
- POST /applications/{id}/advance - Move to reviewing or interview
- POST /applications/{id}/reject - Reject and email the candidate
- PUT /applications/{id}/recording - Attach the interview recording URL
- GET /applications/{id}/events - Lifecycle audit trail
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from api.auth import verify_api_key
from api.dependencies import get_application_service
from api.models.application_schemas import (
    AdvanceStatusRequest,
    ApplicationEventResponse,
    ApplicationResponse,
    RecordingRequest,
    RejectApplicationResponse,
    SubmitAnswersRequest,
    SubmitApplicationRequest,
)
from api.models.common_schemas import ERROR_RESPONSES, NotificationResponse
from services import ApplicationService

router = APIRouter(
    prefix="/applications",
    tags=["Applications"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def submit_application(
    request: SubmitApplicationRequest,
    service: ApplicationService = Depends(get_application_service),
):
    """
    Apply for a job.

    Detects the CV language, stores the CV on the candidate and generates
    follow-up questions. The application starts as `pending`.

    **Errors:**
    - 404 if the job or candidate does not exist
    - 409 `duplicate_application` if the candidate already applied
    """
    return service.submit_application(
        job_id=request.job_id,
        candidate_id=request.candidate_id,
        cv_text=request.cv_text,
        cv_url=request.cv_url,
        cover_letter=request.cover_letter,
    )


@router.get("", response_model=List[ApplicationResponse])
def list_applications(
    candidate_id: Optional[str] = Query(default=None),
    job_id: Optional[str] = Query(default=None),
    company_id: Optional[str] = Query(default=None),
    status_filter: Optional[str] = Query(default=None, alias="status"),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    service: ApplicationService = Depends(get_application_service),
):
    """List applications, best score first (unscored last), then newest."""
    return service.list_applications(
        candidate_id=candidate_id,
        job_id=job_id,
        company_id=company_id,
        status=status_filter,
        limit=limit,
        offset=offset,
    )


@router.get("/{application_id}", response_model=ApplicationResponse)
def get_application(
    application_id: str,
    service: ApplicationService = Depends(get_application_service),
):
    return service.get_application(application_id)


@router.post("/{application_id}/answers", response_model=ApplicationResponse)
def submit_answers(
    application_id: str,
    request: SubmitAnswersRequest,
    service: ApplicationService = Depends(get_application_service),
):
    """
    Submit answers to the follow-up questions.

    Scores and analyzes the candidate and moves the application from
    `pending` to `reviewing`. If scoring fails nothing is saved (502).
    """
    return service.submit_follow_up_answers(application_id, request.answers)


@router.post("/{application_id}/advance", response_model=ApplicationResponse)
def advance_status(
    application_id: str,
    request: AdvanceStatusRequest,
    service: ApplicationService = Depends(get_application_service),
):
    """Company moves the application to `reviewing` or `interview`."""
    return service.advance_status(application_id, request.status)


@router.post("/{application_id}/reject", response_model=RejectApplicationResponse)
def reject_application(
    application_id: str,
    service: ApplicationService = Depends(get_application_service),
):
    """
    Reject the application and email the candidate a personal letter.

    The rejection is saved even if the email cannot be delivered; check
    `notification.success`.
    """
    result = service.reject_application(application_id)
    return RejectApplicationResponse(
        application=ApplicationResponse.model_validate(result["application"]),
        notification=NotificationResponse.model_validate(result["notification"]),
    )


@router.put("/{application_id}/recording", response_model=ApplicationResponse)
def set_recording(
    application_id: str,
    request: RecordingRequest,
    service: ApplicationService = Depends(get_application_service),
):
    return service.set_recording_url(application_id, request.recording_url)


@router.get("/{application_id}/events", response_model=List[ApplicationEventResponse])
def list_events(
    application_id: str,
    service: ApplicationService = Depends(get_application_service),
):
    return service.list_events(application_id)
