"""
Candidate Service - candidate profiles and CV uploads.
"""

import logging
from typing import Any, Dict, Optional

from sqlmodel import Session

from models.candidate import Candidate
from repositories import CandidateRepository
from services.reasoning_service import ReasoningService
from utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Profile fields a candidate can edit directly
PROFILE_FIELDS = frozenset({"name", "phone", "bio", "skills", "linkedin_url", "profile_picture_url"})


class CandidateService:

    def __init__(self, db_session: Session, reasoning: ReasoningService):
        self.db = db_session
        self.reasoning = reasoning
        self.candidate_repo = CandidateRepository(db_session)

    def register_candidate(
        self,
        name: str,
        email: str,
        phone: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> Candidate:
        """
        Create a candidate profile.

        Raises:
            ValidationError: Missing name, invalid email or email already registered
        """
        name = (name or "").strip()
        email = (email or "").strip().lower()
        if not name:
            raise ValidationError("name is required")
        if "@" not in email:
            raise ValidationError("email must be a valid email address")
        if self.candidate_repo.get_by_email(email):
            raise ValidationError(f"A candidate with email {email} already exists")

        candidate = self.candidate_repo.create(
            Candidate(name=name, email=email, phone=phone, user_id=user_id)
        )
        logger.info(f"Candidate {candidate.id} registered")
        return candidate

    def get_candidate(self, candidate_id: str) -> Candidate:
        candidate = self.candidate_repo.get_by_id(candidate_id)
        if not candidate:
            raise NotFoundError(f"Candidate {candidate_id} not found")
        return candidate

    def update_profile(self, candidate_id: str, fields: Dict[str, Any]) -> Candidate:
        """Update editable profile fields; unknown fields are rejected."""
        if not fields:
            raise ValidationError("No fields to update")
        unknown = sorted(set(fields) - PROFILE_FIELDS)
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(unknown)}")

        candidate = self.get_candidate(candidate_id)
        for key, value in fields.items():
            setattr(candidate, key, value)
        return self.candidate_repo.update(candidate)

    def upload_cv(self, candidate_id: str, cv_text: str, cv_url: Optional[str] = None) -> Candidate:
        """
        Replace the candidate's CV and re-detect its language.

        Raises:
            ValidationError: If the CV text is empty
            UpstreamServiceError: If language detection fails
        """
        if not cv_text or not cv_text.strip():
            raise ValidationError("cv_text is required")

        candidate = self.get_candidate(candidate_id)
        language = self.reasoning.detect_language(cv_text)

        candidate.cv_text = cv_text
        candidate.language = language
        if cv_url:
            candidate.cv_url = cv_url
        candidate = self.candidate_repo.update(candidate)
        logger.info(f"CV updated for candidate {candidate_id} (language={language})")
        return candidate
