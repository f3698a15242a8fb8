"""
Offer Service - job offers and their acceptance.

Sending an offer moves the application to offer_sent; accepting it hires the
candidate. Declining only marks the offer; the application keeps its status.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from models.job_offer import JobOffer, OfferStatus
from pipeline.transitions import Action, plan_transition
from repositories import ApplicationRepository, JobOfferRepository
from services.application_context import load_application_context, transition_event
from services.notification_service import NotificationService
from services.reasoning_service import ReasoningService
from utils.email_templates import offer_email, offer_url, onboarding_email
from utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class OfferService:

    def __init__(
        self,
        db_session: Session,
        reasoning: ReasoningService,
        notifier: NotificationService,
    ):
        self.db = db_session
        self.reasoning = reasoning
        self.notifier = notifier
        self.application_repo = ApplicationRepository(db_session)
        self.offer_repo = JobOfferRepository(db_session)

    def get_offer(self, offer_id: str) -> JobOffer:
        offer = self.offer_repo.get_by_id(offer_id)
        if not offer:
            raise NotFoundError(f"Offer {offer_id} not found")
        return offer

    def get_offer_details(self, offer_id: str) -> Dict[str, Any]:
        """Offer with the names the candidate's offer page shows."""
        offer = self.get_offer(offer_id)
        ctx = load_application_context(self.db, offer.application_id)
        return {
            "offer": offer,
            "candidate_name": ctx.candidate.name,
            "job_title": ctx.job.title,
            "company_name": ctx.company.name,
        }

    def send_offer(
        self,
        application_id: str,
        start_date: date,
        salary: Optional[str] = None,
        benefits: Optional[str] = None,
        message: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a pending offer and move the application to offer_sent.

        Args:
            application_id: Application ID
            start_date: Proposed start date
            salary: Salary text, e.g. "650 000 NOK"
            benefits: Benefits description
            message: Personal message from the company

        Returns:
            Dict with offer, application and notification

        Raises:
            NotFoundError: If the application or related records are missing
            ValidationError: Incompatible status or an offer already exists
        """
        if start_date is None:
            raise ValidationError("start_date is required")

        ctx = load_application_context(self.db, application_id)
        has_offer = self.offer_repo.get_by_application(application_id) is not None
        plan = plan_transition(ctx.application.status, Action.SEND_OFFER, has_offer=has_offer)

        offer = JobOffer(
            application_id=application_id,
            start_date=start_date,
            salary=salary,
            benefits=benefits,
            message=message,
            status=OfferStatus.PENDING.value,
        )
        try:
            application = self.application_repo.save_changes(
                ctx.application,
                {"status": plan.to_status.value},
                event=transition_event(application_id, plan, actor="company", detail={"offer_id": offer.id}),
                also_add=[offer],
            )
        except IntegrityError as e:
            raise ValidationError("An offer has already been sent for this application") from e

        self.db.refresh(offer)
        logger.info(f"Offer {offer.id} sent for application {application_id}")

        email = offer_email(
            candidate_name=ctx.candidate.name,
            job_title=ctx.job.title,
            company_name=ctx.company.name,
            start_date=offer.start_date,
            offer_url=offer_url(offer.id),
            salary=offer.salary,
        )
        notification = self.notifier.send_email(ctx.candidate.email, email)
        if not notification.success:
            logger.warning(f"Offer email for application {application_id} not delivered: {notification.error}")

        return {"offer": offer, "application": application, "notification": notification}

    def accept_offer(self, offer_id: str) -> Dict[str, Any]:
        """
        Accept a pending offer and hire the candidate.

        The onboarding letter is generated before the write and sent after it.

        Returns:
            Dict with offer, application and notification

        Raises:
            NotFoundError: If the offer or application is missing
            ValidationError: If the offer is not pending or the application is closed
        """
        offer = self.get_offer(offer_id)
        if offer.status != OfferStatus.PENDING.value:
            raise ValidationError(f"Offer is already {offer.status}")

        ctx = load_application_context(self.db, offer.application_id)
        plan = plan_transition(ctx.application.status, Action.ACCEPT_OFFER)

        body = self.reasoning.generate_onboarding_email(
            candidate_name=ctx.candidate.name,
            job_title=ctx.job.title,
            company_name=ctx.company.name,
            start_date=offer.start_date,
            language=ctx.candidate.language,
        )

        offer.status = OfferStatus.ACCEPTED.value
        offer.signed_at = datetime.utcnow()
        application = self.application_repo.save_changes(
            ctx.application,
            {"status": plan.to_status.value},
            event=transition_event(offer.application_id, plan, actor="candidate", detail={"offer_id": offer.id}),
            also_add=[offer],
        )
        self.db.refresh(offer)
        logger.info(f"Offer {offer_id} accepted; application {offer.application_id} hired")

        email = onboarding_email(ctx.company.name, ctx.job.title, body)
        notification = self.notifier.send_email(ctx.candidate.email, email)
        if not notification.success:
            logger.warning(f"Onboarding email for offer {offer_id} not delivered: {notification.error}")

        return {"offer": offer, "application": application, "notification": notification}

    def decline_offer(self, offer_id: str) -> JobOffer:
        """Decline a pending offer. The application status is not changed."""
        offer = self.get_offer(offer_id)
        if offer.status != OfferStatus.PENDING.value:
            raise ValidationError(f"Offer is already {offer.status}")

        offer.status = OfferStatus.DECLINED.value
        offer = self.offer_repo.update(offer)
        logger.info(f"Offer {offer_id} declined; application {offer.application_id} left unchanged")
        return offer
