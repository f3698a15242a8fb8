"""
Admin API Routes - privileged operations.

All endpoints require X-Admin-Key in addition to the regular API key.

Endpoints:
- GET /admin/companies - List companies (optionally only those awaiting approval)
- POST /admin/companies/{company_id}/approve - Approve a company
- POST /admin/companies/{company_id}/reject - Reject (delete) an unapproved company
- PATCH /admin/applications/{application_id} - Raw field update (audited)
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from api.auth import verify_admin_key, verify_api_key
from api.dependencies import get_application_service, get_company_service
from api.models.application_schemas import ApplicationResponse, RawUpdateRequest
from api.models.common_schemas import ERROR_RESPONSES
from api.models.job_schemas import CompanyResponse
from services import ApplicationService, CompanyService

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


@router.get("/companies", response_model=List[CompanyResponse])
def list_companies(
    pending_only: bool = Query(default=False),
    _: str = Depends(verify_admin_key),
    service: CompanyService = Depends(get_company_service),
):
    return service.list_companies(pending_only=pending_only)


@router.post("/companies/{company_id}/approve", response_model=CompanyResponse)
def approve_company(
    company_id: str,
    _: str = Depends(verify_admin_key),
    service: CompanyService = Depends(get_company_service),
):
    return service.approve_company(company_id)


@router.post("/companies/{company_id}/reject", status_code=status.HTTP_204_NO_CONTENT)
def reject_company(
    company_id: str,
    _: str = Depends(verify_admin_key),
    service: CompanyService = Depends(get_company_service),
):
    """Reject a company registration. The company is deleted."""
    service.reject_company(company_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/applications/{application_id}", response_model=ApplicationResponse)
def raw_update_application(
    application_id: str,
    request: RawUpdateRequest,
    actor: str = Depends(verify_admin_key),
    service: ApplicationService = Depends(get_application_service),
):
    """
    Write application fields directly, bypassing the lifecycle rules.

    Intended for support corrections. Every call is logged and recorded in
    the application's event trail as `raw_update`.
    """
    return service.update_application_fields(application_id, request.fields, actor=actor)
