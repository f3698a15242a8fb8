"""
Reasoning service facade.

Every language-model task of the hiring pipeline goes through here: follow-up
questions, scoring, analysis, interview turns, summaries, emails, job ads and
language detection. The service is stateless; callers pass in everything a prompt needs.

Outputs are returned as the model produced them (apart from parsing);
normalization such as score clamping is done by the ScoringGate.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from config.settings import settings
from models.ai_analysis import AIAnalysis
from models.candidate import Candidate
from models.job import Job
from utils.exceptions import UpstreamServiceError
from utils.language_config import resolve_language_name
from utils.llm_service import LLMService
from utils.prompt_loader import PromptLoader

logger = logging.getLogger(__name__)

# CV excerpt passed to the interviewer on every turn
INTERVIEW_CV_EXCERPT_CHARS = 1000
# Text sample used for language detection
LANGUAGE_SAMPLE_CHARS = 200

FOLLOW_UP_SCHEMA = {"questions": ["string"]}
SCORE_SCHEMA = {"score": "integer 0-100", "reasoning": "string"}
ANALYSIS_SCHEMA = {
    "strengths": ["string"],
    "areasToExplore": ["string"],
    "suggestedQuestions": ["string"],
    "redFlags": ["string"],
    "summary": "string",
}


def format_answers(answers: Optional[Dict[str, str]]) -> str:
    if not answers:
        return ""
    pairs = "\n\n".join(f"Question: {q}\nAnswer: {a}" for q, a in answers.items())
    return f"ANSWERS TO FOLLOW-UP QUESTIONS:\n{pairs}"


def format_transcript(transcript: Optional[Sequence[Dict[str, Any]]]) -> str:
    if not transcript:
        return ""
    return "\n".join(
        f"{'Interviewer' if m.get('role') == 'assistant' else 'Candidate'}: {m.get('content', '')}"
        for m in transcript
    )


class ReasoningService:
    """
    LLM-backed reasoning for the hiring pipeline.

    Args:
        llm: Model for conversational text (interview turns, emails, summaries)
        deep_llm: Model for JSON judgements (questions, score, analysis)
        fast_llm: Model for language detection
        prompt_loader: Template loader

    Models are created on first use so the service can be constructed
    without provider credentials.
    """

    def __init__(
        self,
        llm: Optional[LLMService] = None,
        deep_llm: Optional[LLMService] = None,
        fast_llm: Optional[LLMService] = None,
        prompt_loader: Optional[PromptLoader] = None,
    ):
        self._llm = llm
        self._deep_llm = deep_llm
        self._fast_llm = fast_llm
        self.prompts = prompt_loader or PromptLoader()

    @property
    def llm(self) -> LLMService:
        if self._llm is None:
            self._llm = LLMService()
        return self._llm

    @property
    def deep_llm(self) -> LLMService:
        if self._deep_llm is None:
            self._deep_llm = LLMService.deep()
        return self._deep_llm

    @property
    def fast_llm(self) -> LLMService:
        if self._fast_llm is None:
            self._fast_llm = LLMService.fast()
        return self._fast_llm

    @staticmethod
    def _language(language: Optional[str]) -> str:
        return resolve_language_name(language) or settings.DEFAULT_LANGUAGE

    # ------------------------------------------------------------------
    # Screening
    # ------------------------------------------------------------------

    def generate_follow_up_questions(
        self,
        job: Job,
        cv_text: str,
        language: Optional[str] = None,
    ) -> List[str]:
        """
        Generate follow-up questions from the CV versus the job description.

        Returns:
            Questions as returned by the model (not yet trimmed or deduplicated)
        """
        language = self._language(language)
        system_prompt = self.prompts.load_screening(
            "follow_up_questions",
            language=language,
            job_title=job.title,
            job_description=job.description or "",
            percentage=job.percentage,
            cv_text=cv_text,
        )
        data = self.deep_llm.generate_json(
            system_prompt,
            "Generate the follow-up questions.",
            FOLLOW_UP_SCHEMA,
            langcode=language,
            tags=["screening", "follow_up_questions"],
        )
        questions = data.get("questions", [])
        if not isinstance(questions, list):
            raise UpstreamServiceError("Follow-up questions were not returned as a list")
        return [str(q) for q in questions if q is not None]

    def score_candidate(
        self,
        job: Job,
        candidate: Candidate,
        cv_text: str,
        answers: Optional[Dict[str, str]] = None,
        session_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Score candidate/job fit.

        Returns:
            {"score": <raw model value>, "reasoning": str}
        """
        language = self._language(candidate.language)
        system_prompt = self.prompts.load_screening(
            "score_candidate",
            language=language,
            job_title=job.title,
            industry=job.industry,
            percentage=job.percentage,
            job_description=job.description or "",
            cv_text=cv_text,
            answers_section=format_answers(answers),
        )
        data = self.deep_llm.generate_json(
            system_prompt,
            f"Score {candidate.name} for this position.",
            SCORE_SCHEMA,
            session_id=session_id,
            tags=["screening", "score"],
        )
        return {
            "score": data.get("score"),
            "reasoning": str(data.get("reasoning") or ""),
        }

    def analyze_candidate(
        self,
        job: Job,
        candidate: Candidate,
        cv_text: str,
        answers: Optional[Dict[str, str]] = None,
        interview_transcript: Optional[Sequence[Dict[str, Any]]] = None,
        session_id: Optional[str] = None,
    ) -> AIAnalysis:
        """
        Structured analysis of the candidate. Missing keys default to empty.

        Args:
            job: Job applied for
            candidate: Candidate being analyzed
            cv_text: Extracted CV text
            answers: Follow-up answers, if given
            interview_transcript: Interview transcript, if the interview is done
            session_id: Trace session (application id)
        """
        language = self._language(candidate.language)
        transcript_text = format_transcript(interview_transcript)
        system_prompt = self.prompts.load_screening(
            "analyze_candidate",
            language=language,
            job_title=job.title,
            percentage=job.percentage,
            location=job.location,
            industry=job.industry,
            job_description=job.description or "",
            cv_text=cv_text,
            answers_section=format_answers(answers),
            transcript_section=f"INTERVIEW TRANSCRIPT:\n{transcript_text}" if transcript_text else "",
        )
        data = self.deep_llm.generate_json(
            system_prompt,
            f"Analyze {candidate.name}.",
            ANALYSIS_SCHEMA,
            session_id=session_id,
            tags=["screening", "analysis"],
        )
        # Treat explicit nulls like missing keys
        cleaned = {key: value for key, value in data.items() if value is not None}
        try:
            return AIAnalysis.model_validate(cleaned)
        except PydanticValidationError as e:
            raise UpstreamServiceError(f"Candidate analysis had an unexpected shape: {e}") from e

    def detect_language(self, text: str) -> str:
        """
        Detect the language of a CV or cover letter.

        Returns:
            Language name in English, e.g. "Norwegian"
        """
        sample = (text or "")[:LANGUAGE_SAMPLE_CHARS]
        if not sample.strip():
            return settings.DEFAULT_LANGUAGE

        prompt = self.prompts.load_screening("detect_language", text=sample)
        raw = self.fast_llm.generate(prompt, tags=["language_detection"])
        cleaned = raw.strip().strip('".')
        name = cleaned.splitlines()[0] if cleaned else ""
        return resolve_language_name(name) or settings.DEFAULT_LANGUAGE

    # ------------------------------------------------------------------
    # Interview
    # ------------------------------------------------------------------

    def run_interview_turn(
        self,
        job: Job,
        candidate: Candidate,
        cv_text: str,
        conversation_history: Sequence[Dict[str, Any]],
        language: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> str:
        """
        Produce the interviewer's next line.

        The conversation always opens with a kickoff instruction as the first
        user turn, followed by the transcript so far.

        Returns:
            Assistant reply text
        """
        language = self._language(language or candidate.language)
        system_prompt = self.prompts.load_interview(
            "interviewer_system",
            language=language,
            job_title=job.title,
            location=job.location,
            job_description=job.description or "",
            cv_excerpt=(cv_text or "")[:INTERVIEW_CV_EXCERPT_CHARS],
        )
        kickoff = self.prompts.load_interview(
            "kickoff",
            candidate_name=candidate.name,
            job_title=job.title,
        )
        history = [{"role": "user", "content": kickoff}]
        history.extend(
            {"role": m.get("role"), "content": m.get("content", "")}
            for m in conversation_history
        )
        return self.llm.generate_chat(
            system_prompt,
            history,
            langcode=language,
            session_id=session_id,
            tags=["interview", "turn"],
        )

    def summarize_interview(
        self,
        job: Job,
        transcript: Sequence[Dict[str, Any]],
        language: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> str:
        language = self._language(language)
        prompt = self.prompts.load_interview(
            "summarize_interview",
            language=language,
            job_title=job.title,
            transcript=format_transcript(transcript),
        )
        return self.llm.generate(
            prompt,
            langcode=language,
            session_id=session_id,
            tags=["interview", "summary"],
        )

    # ------------------------------------------------------------------
    # Correspondence
    # ------------------------------------------------------------------

    def generate_rejection_email(
        self,
        candidate_name: str,
        job_title: str,
        company_name: str,
        language: Optional[str] = None,
    ) -> str:
        language = self._language(language)
        prompt = self.prompts.load_correspondence(
            "rejection_email",
            language=language,
            candidate_name=candidate_name,
            job_title=job_title,
            company_name=company_name,
        )
        return self.llm.generate(prompt, langcode=language, tags=["email", "rejection"])

    def generate_onboarding_email(
        self,
        candidate_name: str,
        job_title: str,
        company_name: str,
        start_date: date,
        language: Optional[str] = None,
    ) -> str:
        language = self._language(language)
        prompt = self.prompts.load_correspondence(
            "onboarding_email",
            language=language,
            candidate_name=candidate_name,
            job_title=job_title,
            company_name=company_name,
            start_date=start_date.isoformat(),
        )
        return self.llm.generate(prompt, langcode=language, tags=["email", "onboarding"])

    def generate_job_description(
        self,
        title: str,
        industry: str,
        percentage: int,
        location: str,
        requirements: str = "",
        keywords: Optional[str] = None,
        company_name: Optional[str] = None,
        language: Optional[str] = None,
    ) -> str:
        """
        Draft a job advertisement in markdown (intro, three ## sections, closing).

        Args:
            industry: Industry tag or label; tags like "it-og-teknologi" are
                shown with spaces
            keywords: Extra words the ad should work in
            company_name: Hiring company, if known
        """
        language = self._language(language)
        prompt = self.prompts.load_correspondence(
            "job_description",
            language=language,
            job_title=title,
            industry=industry.replace("-", " "),
            percentage=percentage,
            location=location,
            requirements=requirements or "",
            keywords_line=f"Keywords: {keywords}" if keywords else "",
            company_line=f"Company: {company_name}" if company_name else "",
        )
        return self.llm.generate(prompt, langcode=language, tags=["job", "description"])
