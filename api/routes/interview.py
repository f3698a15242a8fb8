"""
Interview API Routes - Thin Controller Layer.

Handles HTTP concerns (request/response, validation, status codes)
and delegates the turn protocol to InterviewService.

Endpoints:
- GET /interview/{application_id} - Interview state (camera requirement, progress, transcript)
- POST /interview/{application_id}/turn - Open the interview or answer the current question
"""

from fastapi import APIRouter, Depends

from api.auth import verify_api_key
from api.dependencies import get_interview_service
from api.models.application_schemas import ApplicationResponse
from api.models.common_schemas import ERROR_RESPONSES
from api.models.interview_schemas import (
    InterviewStateResponse,
    InterviewTurnRequest,
    InterviewTurnResponse,
)
from services import InterviewService

router = APIRouter(
    prefix="/interview",
    tags=["Interview"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


@router.get("/{application_id}", response_model=InterviewStateResponse)
def get_interview_state(
    application_id: str,
    service: InterviewService = Depends(get_interview_service),
):
    """Current interview state for the interview page."""
    return service.get_interview_state(application_id)


@router.post("/{application_id}/turn", response_model=InterviewTurnResponse)
def post_interview_turn(
    application_id: str,
    request: InterviewTurnRequest,
    service: InterviewService = Depends(get_interview_service),
):
    """
    Run one interview turn.

    **Flow:**
    1. First call (empty transcript): send no message; the interviewer greets
       the candidate and asks the first question
    2. Every later call: send the candidate's answer in `message`
    3. After the 7th answer the interview completes: `completed` is true,
       `message` is empty, and the application holds the interview summary
       and a refreshed analysis

    **Errors:**
    - 400 if the interview is already completed or the answer is missing
    - 409 `conflict` if another turn for the same application was saved first
    - 502 if the interviewer could not respond (nothing is saved)
    """
    result = service.post_interview_turn(application_id, request.message)
    return InterviewTurnResponse(
        message=result["message"],
        completed=result["completed"],
        user_turns=result["user_turns"],
        transcript=result["transcript"],
        application=ApplicationResponse.model_validate(result["application"]),
    )
