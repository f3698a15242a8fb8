"""
Application Service - hiring pipeline lifecycle.

Owns the application-level actions of the pipeline:
- Submitting an application (language detection + follow-up questions)
- Submitting follow-up answers (scoring + analysis)
- Company status changes and rejection
- Recording URL capture
- Privileged raw field updates (audited)

Every action asks the lifecycle planner first, runs the reasoning calls it
needs, and then persists the result in one versioned write. Notifications are
sent after the write and never fail the action.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from models.application import Application, ApplicationStatus
from models.application_event import ApplicationEvent
from pipeline.transitions import Action, plan_transition
from repositories import (
    ApplicationEventRepository,
    ApplicationRepository,
    CandidateRepository,
    JobRepository,
)
from services.application_context import load_application_context, transition_event
from services.notification_service import NotificationService
from services.reasoning_service import ReasoningService
from services.scoring_gate import MAX_SCORE, MIN_SCORE, ScoringGate
from utils.email_templates import rejection_email
from utils.exceptions import DuplicateApplicationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Targets reachable through advance_status; other statuses have dedicated actions
ADVANCE_ACTIONS = {
    ApplicationStatus.REVIEWING.value: Action.ADVANCE_TO_REVIEWING,
    ApplicationStatus.INTERVIEW.value: Action.ADVANCE_TO_INTERVIEW,
}

# Fields the privileged raw update may write
RAW_UPDATE_FIELDS = frozenset({
    "status",
    "cover_letter",
    "follow_up_questions",
    "follow_up_answers",
    "score",
    "scoring_reasoning",
    "ai_analysis",
    "interview_transcript",
    "interview_summary",
    "interview_completed",
    "recording_url",
    "rejection_sent",
})


class ApplicationService:
    """
    Application service for pipeline lifecycle operations.

    Args:
        db_session: Database session for this unit of work
        reasoning: Reasoning facade (LLM)
        notifier: Notification facade (email)
    """

    def __init__(
        self,
        db_session: Session,
        reasoning: ReasoningService,
        notifier: NotificationService,
    ):
        self.db = db_session
        self.reasoning = reasoning
        self.notifier = notifier
        self.gate = ScoringGate(reasoning)

        self.application_repo = ApplicationRepository(db_session)
        self.event_repo = ApplicationEventRepository(db_session)
        self.candidate_repo = CandidateRepository(db_session)
        self.job_repo = JobRepository(db_session)

    # ============ SUBMISSION ============

    def submit_application(
        self,
        job_id: str,
        candidate_id: str,
        cv_text: str,
        cv_url: Optional[str] = None,
        cover_letter: Optional[str] = None,
    ) -> Application:
        """
        Create a pending application with generated follow-up questions.

        The candidate's CV fields and detected language are updated in the
        same transaction as the insert.

        Args:
            job_id: Job applied for
            candidate_id: Applying candidate
            cv_text: Extracted CV text
            cv_url: Where the uploaded CV is stored
            cover_letter: Optional cover letter

        Returns:
            Created Application

        Raises:
            NotFoundError: If the job or candidate does not exist
            ValidationError: If the CV text is empty
            DuplicateApplicationError: If the candidate already applied
            UpstreamServiceError: If language detection or question generation fails
        """
        job = self.job_repo.get_by_id(job_id)
        if not job:
            raise NotFoundError(f"Job {job_id} not found")

        candidate = self.candidate_repo.get_by_id(candidate_id)
        if not candidate:
            raise NotFoundError(f"Candidate {candidate_id} not found")

        if not cv_text or not cv_text.strip():
            raise ValidationError("cv_text is required")

        if self.application_repo.get_by_job_and_candidate(job_id, candidate_id):
            raise DuplicateApplicationError("You have already applied for this job")

        language = self.reasoning.detect_language(cv_text or cover_letter or "")
        questions = self.gate.generate_follow_up_questions(job, cv_text, language)

        candidate.cv_text = cv_text
        candidate.language = language
        if cv_url:
            candidate.cv_url = cv_url

        application = Application(
            job_id=job_id,
            candidate_id=candidate_id,
            cover_letter=cover_letter,
            follow_up_questions=questions,
            status=ApplicationStatus.PENDING.value,
        )
        self.db.add(candidate)
        self.db.add(application)
        self.db.add(ApplicationEvent(
            application_id=application.id,
            action="submit_application",
            to_status=ApplicationStatus.PENDING.value,
            actor="candidate",
            detail={"questions": len(questions), "language": language},
        ))

        try:
            self.application_repo.commit()
        except IntegrityError as e:
            # Lost the race against a concurrent submit for the same pair
            raise DuplicateApplicationError("You have already applied for this job") from e

        self.db.refresh(application)
        logger.info(
            f"Application {application.id} submitted for job {job_id} "
            f"({len(questions)} follow-up questions, language={language})"
        )
        return application

    # ============ QUERIES ============

    def get_application(self, application_id: str) -> Application:
        application = self.application_repo.get_by_id(application_id)
        if not application:
            raise NotFoundError(f"Application {application_id} not found")
        return application

    def list_applications(
        self,
        candidate_id: Optional[str] = None,
        job_id: Optional[str] = None,
        company_id: Optional[str] = None,
        status: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Application]:
        if status is not None and status not in {s.value for s in ApplicationStatus}:
            raise ValidationError(f"Unknown application status: {status}")
        return self.application_repo.list_applications(
            candidate_id=candidate_id,
            job_id=job_id,
            company_id=company_id,
            status=status,
            limit=limit,
            offset=offset,
        )

    def list_events(self, application_id: str) -> List[ApplicationEvent]:
        self.get_application(application_id)
        return self.event_repo.get_by_application(application_id)

    # ============ LIFECYCLE ACTIONS ============

    def submit_follow_up_answers(self, application_id: str, answers: Dict[str, str]) -> Application:
        """
        Record follow-up answers, score and analyze the candidate, and move
        the application to reviewing.

        Args:
            application_id: Application ID
            answers: Answer text keyed by question text

        Returns:
            Updated Application with score, reasoning and analysis

        Raises:
            NotFoundError: If the application, candidate or job is missing
            ValidationError: If no answers are given or the status is not pending
            UpstreamServiceError: If scoring or analysis fails (nothing is saved)
            ConflictError: If the application changed concurrently
        """
        ctx = load_application_context(self.db, application_id)

        cleaned = {
            str(question).strip(): str(answer).strip()
            for question, answer in (answers or {}).items()
            if str(question).strip() and answer is not None and str(answer).strip()
        }
        if not cleaned:
            raise ValidationError("At least one answer is required")

        plan = plan_transition(ctx.application.status, Action.SUBMIT_ANSWERS)

        result = self.gate.score_and_analyze(
            ctx.job,
            ctx.candidate,
            ctx.cv_text,
            cleaned,
            session_id=ctx.application.id,
        )

        application = self.application_repo.save_changes(
            ctx.application,
            {
                "follow_up_answers": cleaned,
                "score": result.score,
                "scoring_reasoning": result.reasoning,
                "ai_analysis": result.analysis.to_json(),
                "status": plan.to_status.value,
            },
            event=transition_event(
                application_id, plan, actor="candidate", detail={"score": result.score}
            ),
        )
        logger.info(
            f"Application {application_id}: {plan.from_status.value} -> {plan.to_status.value} "
            f"(score={result.score})"
        )
        return application

    def advance_status(self, application_id: str, target_status: str) -> Application:
        """
        Company-driven move to reviewing or interview.

        Raises:
            ValidationError: For any other target, or an incompatible current status
        """
        action = ADVANCE_ACTIONS.get(target_status)
        if action is None:
            raise ValidationError(
                f"Cannot advance to '{target_status}'; use the dedicated action for that status"
            )

        application = self.get_application(application_id)
        plan = plan_transition(application.status, action)

        application = self.application_repo.save_changes(
            application,
            {"status": plan.to_status.value},
            event=transition_event(application_id, plan, actor="company"),
        )
        logger.info(f"Application {application_id}: {plan.from_status.value} -> {plan.to_status.value}")
        return application

    def reject_application(self, application_id: str) -> Dict[str, Any]:
        """
        Reject an application and email the candidate a generated letter.

        The letter is generated before the write; delivery happens after it
        and does not affect the outcome.

        Returns:
            Dict with application and notification (NotificationResult)
        """
        ctx = load_application_context(self.db, application_id)
        plan = plan_transition(ctx.application.status, Action.REJECT)

        body = self.reasoning.generate_rejection_email(
            candidate_name=ctx.candidate.name,
            job_title=ctx.job.title,
            company_name=ctx.company.name,
            language=ctx.candidate.language,
        )

        application = self.application_repo.save_changes(
            ctx.application,
            {"status": plan.to_status.value, "rejection_sent": True},
            event=transition_event(application_id, plan, actor="company"),
        )
        logger.info(f"Application {application_id}: {plan.from_status.value} -> {plan.to_status.value}")

        email = rejection_email(ctx.job.title, ctx.company.name, body)
        notification = self.notifier.send_email(ctx.candidate.email, email)
        if not notification.success:
            logger.warning(
                f"Rejection email for application {application_id} not delivered: {notification.error}"
            )

        return {"application": application, "notification": notification}

    def set_recording_url(self, application_id: str, recording_url: str) -> Application:
        """Attach the interview recording location."""
        if not recording_url or not recording_url.strip():
            raise ValidationError("recording_url is required")

        application = self.get_application(application_id)
        return self.application_repo.save_changes(
            application, {"recording_url": recording_url.strip()}
        )

    # ============ PRIVILEGED ============

    def update_application_fields(
        self,
        application_id: str,
        fields: Dict[str, Any],
        actor: str = "admin",
    ) -> Application:
        """
        Write arbitrary whitelisted fields, bypassing the lifecycle planner.

        Administrator-only. Every use is logged and recorded as a
        `raw_update` event listing the changed fields.

        Raises:
            ValidationError: Unknown fields, invalid status/score values, a
                rewritten transcript or a reopened interview
        """
        if not fields:
            raise ValidationError("No fields to update")

        unknown = sorted(set(fields) - RAW_UPDATE_FIELDS)
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(unknown)}")

        if "status" in fields and fields["status"] not in {s.value for s in ApplicationStatus}:
            raise ValidationError(f"Unknown application status: {fields['status']}")

        score = fields.get("score")
        if score is not None and (
            isinstance(score, bool) or not isinstance(score, int) or not MIN_SCORE <= score <= MAX_SCORE
        ):
            raise ValidationError(f"score must be an integer between {MIN_SCORE} and {MAX_SCORE}")

        application = self.get_application(application_id)

        # Transcript is append-only and completion never reverts
        if "interview_transcript" in fields:
            stored = list(application.interview_transcript or [])
            new_transcript = fields["interview_transcript"]
            if not isinstance(new_transcript, list) or new_transcript[:len(stored)] != stored:
                raise ValidationError("interview_transcript may only be extended, not rewritten")
        if application.interview_completed and fields.get("interview_completed") is False:
            raise ValidationError("A completed interview cannot be reopened")

        from_status = application.status
        changed = sorted(fields)

        logger.warning(
            f"Raw update on application {application_id} by {actor}: fields={changed}"
        )
        return self.application_repo.save_changes(
            application,
            dict(fields),
            event=ApplicationEvent(
                application_id=application_id,
                action="raw_update",
                from_status=from_status,
                to_status=fields.get("status", from_status),
                actor=actor,
                detail={"fields": changed},
            ),
        )
