"""
Offer API Routes.

Endpoints:
- POST /offers - Send an offer (application -> offer_sent)
- GET /offers/{offer_id} - Offer details for the candidate's offer page
- POST /offers/{offer_id}/accept - Accept and sign (application -> hired)
- POST /offers/{offer_id}/decline - Decline (application status unchanged)
"""

from fastapi import APIRouter, Depends, status

from api.auth import verify_api_key
from api.dependencies import get_offer_service
from api.models.application_schemas import ApplicationResponse
from api.models.common_schemas import ERROR_RESPONSES, NotificationResponse
from api.models.offer_schemas import (
    OfferActionResponse,
    OfferDetailsResponse,
    OfferResponse,
    SendOfferRequest,
)
from services import OfferService

router = APIRouter(
    prefix="/offers",
    tags=["Offers"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


def _action_response(result) -> OfferActionResponse:
    return OfferActionResponse(
        offer=OfferResponse.model_validate(result["offer"]),
        application=ApplicationResponse.model_validate(result["application"]),
        notification=NotificationResponse.model_validate(result["notification"]),
    )


@router.post("", response_model=OfferActionResponse, status_code=status.HTTP_201_CREATED)
def send_offer(
    request: SendOfferRequest,
    service: OfferService = Depends(get_offer_service),
):
    """
    Send a job offer and email the candidate a link to it.

    Allowed from `reviewing`, `interview` or `reference_check`; one offer per application.
    """
    result = service.send_offer(
        application_id=request.application_id,
        start_date=request.start_date,
        salary=request.salary,
        benefits=request.benefits,
        message=request.message,
    )
    return _action_response(result)


@router.get("/{offer_id}", response_model=OfferDetailsResponse)
def get_offer(
    offer_id: str,
    service: OfferService = Depends(get_offer_service),
):
    details = service.get_offer_details(offer_id)
    return OfferDetailsResponse(
        offer=OfferResponse.model_validate(details["offer"]),
        candidate_name=details["candidate_name"],
        job_title=details["job_title"],
        company_name=details["company_name"],
    )


@router.post("/{offer_id}/accept", response_model=OfferActionResponse)
def accept_offer(
    offer_id: str,
    service: OfferService = Depends(get_offer_service),
):
    """Accept the offer: the candidate is hired and receives a welcome email."""
    return _action_response(service.accept_offer(offer_id))


@router.post("/{offer_id}/decline", response_model=OfferResponse)
def decline_offer(
    offer_id: str,
    service: OfferService = Depends(get_offer_service),
):
    """Decline the offer. The application keeps its current status."""
    return service.decline_offer(offer_id)
