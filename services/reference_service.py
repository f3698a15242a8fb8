"""
Reference Service - reference checks.

The company requests one reference per application; the referee answers
once through the public form.
"""

import logging
from datetime import datetime
from typing import Any, Dict

from sqlmodel import Session

from models.reference import Reference, ReferenceResponse
from pipeline.transitions import Action, plan_transition
from repositories import ApplicationRepository, ReferenceRepository
from services.application_context import load_application_context, transition_event
from services.notification_service import NotificationService
from utils.email_templates import reference_form_url, reference_request_email
from utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class ReferenceService:

    def __init__(self, db_session: Session, notifier: NotificationService):
        self.db = db_session
        self.notifier = notifier
        self.application_repo = ApplicationRepository(db_session)
        self.reference_repo = ReferenceRepository(db_session)

    def request_reference(self, application_id: str, referee_name: str, referee_email: str) -> Dict[str, Any]:
        """
        Create a reference request and email the referee the form link.

        Args:
            application_id: Application ID
            referee_name: Name of the referee
            referee_email: Where the form link is sent

        Returns:
            Dict with reference, application and notification

        Raises:
            ValidationError: Missing referee details, incompatible status,
                or a reference already requested
        """
        referee_name = (referee_name or "").strip()
        referee_email = (referee_email or "").strip()
        if not referee_name:
            raise ValidationError("referee_name is required")
        if "@" not in referee_email:
            raise ValidationError("referee_email must be a valid email address")

        ctx = load_application_context(self.db, application_id)
        has_reference = bool(self.reference_repo.get_by_application(application_id))
        plan = plan_transition(ctx.application.status, Action.REQUEST_REFERENCE, has_reference=has_reference)

        reference = Reference(
            application_id=application_id,
            referee_name=referee_name,
            referee_email=referee_email,
        )
        application = self.application_repo.save_changes(
            ctx.application,
            {"status": plan.to_status.value},
            event=transition_event(application_id, plan, actor="company", detail={"reference_id": reference.id}),
            also_add=[reference],
        )
        self.db.refresh(reference)
        logger.info(f"Reference {reference.id} requested for application {application_id}")

        email = reference_request_email(
            referee_name=referee_name,
            candidate_name=ctx.candidate.name,
            job_title=ctx.job.title,
            company_name=ctx.company.name,
            form_url=reference_form_url(reference.id),
        )
        notification = self.notifier.send_email(referee_email, email)
        if notification.success:
            reference.sent_at = datetime.utcnow()
            reference = self.reference_repo.update(reference)
        else:
            logger.warning(f"Reference email {reference.id} not delivered: {notification.error}")

        return {"reference": reference, "application": application, "notification": notification}

    def get_reference(self, reference_id: str) -> Reference:
        reference = self.reference_repo.get_by_id(reference_id)
        if not reference:
            raise NotFoundError(f"Reference {reference_id} not found")
        return reference

    def get_reference_form(self, reference_id: str) -> Dict[str, Any]:
        """What the referee sees: who they are vouching for and for which job."""
        reference = self.get_reference(reference_id)
        ctx = load_application_context(self.db, reference.application_id)
        return {
            "reference": reference,
            "candidate_name": ctx.candidate.name,
            "job_title": ctx.job.title,
            "company_name": ctx.company.name,
        }

    def submit_response(self, reference_id: str, response: ReferenceResponse) -> Reference:
        """
        Store the referee's answers. A reference can be answered once.

        Raises:
            NotFoundError: If the reference does not exist
            ValidationError: If it was already answered
        """
        reference = self.get_reference(reference_id)
        if reference.response is not None:
            raise ValidationError("This reference has already been submitted")

        reference.response = response.model_dump()
        reference.responded_at = datetime.utcnow()
        reference = self.reference_repo.update(reference)
        logger.info(f"Reference {reference_id} answered for application {reference.application_id}")
        return reference
