"""
Interview Service - AI interview turn protocol.

Owns the interview sub-state of an application:
- Transcript accumulation (append-only, stored on the application)
- Turn counting and completion detection
- Interviewer turns via the reasoning service
- Summary and analysis refresh once the interview completes

There is no in-memory session: every turn reloads the application and
persists the new transcript in a single versioned write.
"""

import logging
from typing import Any, Dict, Optional

from sqlmodel import Session

from models.application import TERMINAL_STATUSES, ApplicationStatus
from models.interview_message import InterviewRole
from pipeline.interview import MAX_USER_TURNS, append_message, count_user_turns, prepare_turn
from pipeline.transitions import Action, plan_transition
from repositories import ApplicationRepository
from services.application_context import load_application_context, transition_event
from services.reasoning_service import ReasoningService
from utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


class InterviewService:
    """
    Application service for interview operations.

    Args:
        db_session: Database session for this unit of work
        reasoning: Reasoning facade (LLM)
    """

    def __init__(self, db_session: Session, reasoning: ReasoningService):
        self.db = db_session
        self.reasoning = reasoning
        self.application_repo = ApplicationRepository(db_session)

    def get_interview_state(self, application_id: str) -> Dict[str, Any]:
        """
        Current interview state for the interview page.

        Returns:
            Dict with camera_required, interview_completed, status,
            transcript, user_turns and max_user_turns
        """
        ctx = load_application_context(self.db, application_id)
        transcript = ctx.application.interview_transcript or []
        return {
            "application_id": ctx.application.id,
            "job_title": ctx.job.title,
            "camera_required": ctx.job.camera_required,
            "interview_completed": ctx.application.interview_completed,
            "status": ctx.application.status,
            "transcript": transcript,
            "user_turns": count_user_turns(transcript),
            "max_user_turns": MAX_USER_TURNS,
        }

    def post_interview_turn(self, application_id: str, utterance: Optional[str] = None) -> Dict[str, Any]:
        """
        Process one interview turn.

        The first call opens the interview and the assistant speaks first.
        Each later call carries the candidate's answer. Once the candidate
        has answered MAX_USER_TURNS times the interview completes: no
        interviewer reply is generated, the transcript is summarized, the
        analysis is refreshed and the application moves to interview.

        All reasoning calls happen before the write, so a failed call leaves
        the application untouched.

        Args:
            application_id: Application ID
            utterance: Candidate's answer (ignored on the first call; without
                one a later call re-prompts with another interviewer line)

        Returns:
            Dict with application, transcript, message (latest interviewer
            line, "" on the completing turn), completed and user_turns

        Raises:
            NotFoundError: If the application, candidate or job is missing
            ValidationError: Terminal application or finished interview
            UpstreamServiceError: If a reasoning call fails
            ConflictError: If another turn was saved concurrently
        """
        ctx = load_application_context(self.db, application_id)
        application = ctx.application

        if ApplicationStatus(application.status) in TERMINAL_STATUSES:
            raise ValidationError(f"Application is {application.status}; the interview is closed")
        if application.interview_completed:
            raise ValidationError("The interview has already been completed")

        turn = prepare_turn(application.interview_transcript, utterance)
        if turn.is_first_message and utterance:
            logger.debug(f"Ignoring utterance on the opening turn of application {application_id}")

        if not turn.completed:
            reply = self.reasoning.run_interview_turn(
                ctx.job,
                ctx.candidate,
                ctx.cv_text,
                turn.transcript,
                language=ctx.candidate.language,
                session_id=application_id,
            )
            transcript = append_message(turn.transcript, InterviewRole.ASSISTANT, reply)
            application = self.application_repo.save_changes(
                application, {"interview_transcript": transcript}
            )
            return {
                "application": application,
                "transcript": transcript,
                "message": reply,
                "completed": False,
                "user_turns": turn.user_turns,
            }

        plan = plan_transition(application.status, Action.COMPLETE_INTERVIEW)
        if plan.is_backwards:
            logger.warning(
                f"Completing interview moves application {application_id} back "
                f"from {plan.from_status.value} to {plan.to_status.value}"
            )

        summary = self.reasoning.summarize_interview(
            ctx.job,
            turn.transcript,
            language=ctx.candidate.language,
            session_id=application_id,
        )
        analysis = self.reasoning.analyze_candidate(
            ctx.job,
            ctx.candidate,
            ctx.cv_text,
            answers=application.follow_up_answers,
            interview_transcript=turn.transcript,
            session_id=application_id,
        )

        application = self.application_repo.save_changes(
            application,
            {
                "interview_transcript": turn.transcript,
                "interview_summary": summary,
                "ai_analysis": analysis.to_json(),
                "interview_completed": True,
                "status": plan.to_status.value,
            },
            event=transition_event(
                application_id, plan, actor="system", detail={"user_turns": turn.user_turns}
            ),
        )
        logger.info(
            f"Interview completed for application {application_id} after {turn.user_turns} answers"
        )
        return {
            "application": application,
            "transcript": turn.transcript,
            "message": "",
            "completed": True,
            "user_turns": turn.user_turns,
        }
