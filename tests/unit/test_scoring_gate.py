"""
Unit tests for score normalization and follow-up question cleaning.

Run: pytest tests/unit/test_scoring_gate.py -v
"""

import math

import pytest

from models.ai_analysis import AIAnalysis
from services.scoring_gate import ScoringGate, clean_questions, normalize_score
from utils.exceptions import UpstreamServiceError


class TestNormalizeScore:

    @pytest.mark.parametrize("raw,expected", [
        (72, 72),
        (72.4, 72),
        ("85", 85),
        (" 40 ", 40),
        (0, 0),
        (100, 100),
    ])
    def test_in_range(self, raw, expected):
        assert normalize_score(raw) == expected

    @pytest.mark.parametrize("raw,expected", [(150, 100), (-5, 0), ("101.7", 100)])
    def test_clamped(self, raw, expected):
        assert normalize_score(raw) == expected

    @pytest.mark.parametrize("raw", [None, True, "high", "", math.nan, math.inf, [80]])
    def test_non_numeric_raises(self, raw):
        with pytest.raises(UpstreamServiceError):
            normalize_score(raw)


class TestCleanQuestions:

    def test_trims_and_deduplicates(self):
        questions = ["  Why this job? ", "Why this job?", "", "   ", "Do you have a licence?"]
        assert clean_questions(questions) == ["Why this job?", "Do you have a licence?"]

    def test_keeps_order(self):
        assert clean_questions(["b", "a", "b"]) == ["b", "a"]


class _StubReasoning:
    def __init__(self, score, questions=None):
        self._score = score
        self._questions = questions or []
        self.calls = []

    def generate_follow_up_questions(self, job, cv_text, language=None):
        return self._questions

    def score_candidate(self, job, candidate, cv_text, answers=None, session_id=None):
        self.calls.append("score")
        return {"score": self._score, "reasoning": "Relevant experience"}

    def analyze_candidate(self, job, candidate, cv_text, answers=None, interview_transcript=None, session_id=None):
        self.calls.append("analyze")
        return AIAnalysis(summary="Solid", strengths=["Reliable"])


class TestScoringGate:

    def test_score_and_analyze(self):
        reasoning = _StubReasoning(score=130)
        result = ScoringGate(reasoning).score_and_analyze(None, None, "cv", {"Q": "A"})
        assert result.score == 100
        assert result.reasoning == "Relevant experience"
        assert result.analysis.summary == "Solid"
        assert reasoning.calls == ["score", "analyze"]

    def test_unusable_score_skips_analysis(self):
        reasoning = _StubReasoning(score="n/a")
        with pytest.raises(UpstreamServiceError):
            ScoringGate(reasoning).score_and_analyze(None, None, "cv")
        assert reasoning.calls == ["score"]

    def test_follow_up_questions_are_cleaned(self):
        reasoning = _StubReasoning(score=50, questions=["A?", " A? ", "B?"])
        assert ScoringGate(reasoning).generate_follow_up_questions(None, "cv") == ["A?", "B?"]
