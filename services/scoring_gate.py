"""
Scoring/question gate.

Decides what the reasoning service's screening output turns into on the
application: cleaned follow-up questions, a bounded integer score, the
scoring rationale and the structured analysis. Score and analysis come from
two independent calls and are never reconciled.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from models.ai_analysis import AIAnalysis
from models.candidate import Candidate
from models.job import Job
from services.reasoning_service import ReasoningService
from utils.exceptions import UpstreamServiceError

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


@dataclass(frozen=True)
class GateResult:
    score: int
    reasoning: str
    analysis: AIAnalysis


def clean_questions(questions: List[Any]) -> List[str]:
    """Trim questions and drop blanks and duplicates, keeping first-seen order."""
    seen = set()
    cleaned = []
    for question in questions:
        text = str(question).strip()
        if not text or text in seen:
            continue
        seen.add(text)
        cleaned.append(text)
    return cleaned


def normalize_score(raw: Any) -> int:
    """
    Coerce a model-produced score to an integer in 0..100.

    Raises:
        UpstreamServiceError: If the value is not numeric
    """
    if isinstance(raw, bool) or raw is None:
        raise UpstreamServiceError(f"Score is not numeric: {raw!r}")
    try:
        value = float(str(raw).strip())
    except ValueError:
        raise UpstreamServiceError(f"Score is not numeric: {raw!r}")
    if math.isnan(value) or math.isinf(value):
        raise UpstreamServiceError(f"Score is not numeric: {raw!r}")

    score = int(round(value))
    clamped = max(MIN_SCORE, min(MAX_SCORE, score))
    if clamped != score:
        logger.warning(f"Score {raw!r} outside {MIN_SCORE}-{MAX_SCORE}, clamped to {clamped}")
    return clamped


class ScoringGate:
    """Screening decisions on top of the reasoning service."""

    def __init__(self, reasoning: ReasoningService):
        self.reasoning = reasoning

    def generate_follow_up_questions(
        self,
        job: Job,
        cv_text: str,
        language: Optional[str] = None,
    ) -> List[str]:
        questions = self.reasoning.generate_follow_up_questions(job, cv_text, language)
        cleaned = clean_questions(questions)
        if len(cleaned) != len(questions):
            logger.info(f"Dropped {len(questions) - len(cleaned)} blank or duplicate follow-up questions")
        return cleaned

    def score_and_analyze(
        self,
        job: Job,
        candidate: Candidate,
        cv_text: str,
        answers: Optional[Dict[str, str]] = None,
        session_id: Optional[str] = None,
    ) -> GateResult:
        """
        Score and analyze a candidate.

        Args:
            job: Job applied for
            candidate: Candidate
            cv_text: Extracted CV text
            answers: Follow-up answers keyed by question
            session_id: Trace session (application id)

        Returns:
            GateResult with bounded score, reasoning and analysis

        Raises:
            UpstreamServiceError: If either call fails or the score is unusable
        """
        scored = self.reasoning.score_candidate(job, candidate, cv_text, answers, session_id=session_id)
        score = normalize_score(scored.get("score"))
        analysis = self.reasoning.analyze_candidate(
            job, candidate, cv_text, answers=answers, session_id=session_id
        )
        return GateResult(score=score, reasoning=scored.get("reasoning", ""), analysis=analysis)
