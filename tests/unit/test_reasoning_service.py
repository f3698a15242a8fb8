"""
Unit tests for ReasoningService prompt wiring and output parsing.

The language models are replaced by a recording stub; prompts are rendered
from the real templates under prompts/.
Run: pytest tests/unit/test_reasoning_service.py -v
"""

import pytest

from models.candidate import Candidate
from models.job import Job
from services.reasoning_service import INTERVIEW_CV_EXCERPT_CHARS, ReasoningService
from utils.exceptions import UpstreamServiceError
from utils.llm_service import LLMService


class StubLLM:
    def __init__(self, text="", data=None):
        self.text = text
        self.data = data or {}
        self.calls = []

    def generate(self, prompt, system_prompt=None, langcode=None, session_id=None, tags=None):
        self.calls.append({"kind": "generate", "prompt": prompt, "langcode": langcode})
        return self.text

    def generate_chat(self, system_prompt, history, langcode=None, session_id=None, tags=None):
        self.calls.append({"kind": "chat", "system_prompt": system_prompt, "history": list(history)})
        return self.text

    def generate_json(self, system_prompt, human_prompt, schema, langcode=None, session_id=None, tags=None):
        self.calls.append({"kind": "json", "system_prompt": system_prompt, "session_id": session_id})
        return self.data


JOB = Job(
    company_id="c1",
    title="Helsefagarbeider",
    description="Hjemmetjenesten",
    industry="helse-og-omsorg",
    percentage=80,
    location="Bergen",
)
CANDIDATE = Candidate(name="Kari Nordmann", email="kari@example.no", language="Norwegian")


class TestScreening:

    def test_follow_up_questions_prompt(self):
        llm = StubLLM(data={"questions": ["Når kan du starte?", None]})
        service = ReasoningService(deep_llm=llm)

        questions = service.generate_follow_up_questions(JOB, "CV tekst", "no")

        assert questions == ["Når kan du starte?"]
        prompt = llm.calls[0]["system_prompt"]
        assert "Helsefagarbeider" in prompt
        assert "CV tekst" in prompt
        assert "Norwegian" in prompt

    def test_questions_not_a_list(self):
        service = ReasoningService(deep_llm=StubLLM(data={"questions": "Når kan du starte?"}))
        with pytest.raises(UpstreamServiceError):
            service.generate_follow_up_questions(JOB, "CV")

    def test_score_returns_raw_value(self):
        llm = StubLLM(data={"score": "85", "reasoning": "God match"})
        result = ReasoningService(deep_llm=llm).score_candidate(
            JOB, CANDIDATE, "CV", {"Q": "A"}, session_id="app-1"
        )
        assert result == {"score": "85", "reasoning": "God match"}
        assert llm.calls[0]["session_id"] == "app-1"
        assert "Question: Q\nAnswer: A" in llm.calls[0]["system_prompt"]

    def test_analysis_tolerates_nulls(self):
        llm = StubLLM(data={"summary": "Ok", "strengths": ["A"], "redFlags": None})
        analysis = ReasoningService(deep_llm=llm).analyze_candidate(JOB, CANDIDATE, "CV")
        assert analysis.summary == "Ok"
        assert analysis.red_flags == []
        assert analysis.to_json()["areasToExplore"] == []

    def test_analysis_with_wrong_shape(self):
        llm = StubLLM(data={"strengths": "not a list"})
        with pytest.raises(UpstreamServiceError):
            ReasoningService(deep_llm=llm).analyze_candidate(JOB, CANDIDATE, "CV")

    def test_analysis_includes_transcript(self):
        llm = StubLLM(data={"summary": "Ok"})
        transcript = [
            {"role": "assistant", "content": "Hvorfor?"},
            {"role": "user", "content": "Fordi."},
        ]
        ReasoningService(deep_llm=llm).analyze_candidate(JOB, CANDIDATE, "CV", interview_transcript=transcript)
        assert "Interviewer: Hvorfor?\nCandidate: Fordi." in llm.calls[0]["system_prompt"]


class TestLanguageDetection:

    @pytest.mark.parametrize("raw,expected", [
        ("Norwegian", "Norwegian"),
        ('"norsk".', "Norwegian"),
        ("Swedish\nThe text is Swedish.", "Swedish"),
    ])
    def test_detects(self, raw, expected):
        service = ReasoningService(fast_llm=StubLLM(text=raw))
        assert service.detect_language("Jeg har jobbet i hjemmetjenesten.") == expected

    def test_empty_text_uses_default(self):
        llm = StubLLM(text="English")
        assert ReasoningService(fast_llm=llm).detect_language("   ") == "Norwegian"
        assert llm.calls == []


class TestInterview:

    def test_kickoff_precedes_transcript(self):
        llm = StubLLM(text="Hei Kari!")
        service = ReasoningService(llm=llm)
        history = [{"role": "assistant", "content": "Hei", "timestamp": "2026-01-01T10:00:00"}]

        reply = service.run_interview_turn(JOB, CANDIDATE, "x" * 5000, history)

        assert reply == "Hei Kari!"
        call = llm.calls[0]
        assert call["history"][0]["role"] == "user"
        assert "Kari Nordmann" in call["history"][0]["content"]
        assert call["history"][1] == {"role": "assistant", "content": "Hei"}
        assert "x" * INTERVIEW_CV_EXCERPT_CHARS in call["system_prompt"]
        assert "x" * (INTERVIEW_CV_EXCERPT_CHARS + 1) not in call["system_prompt"]


class TestJobDescription:

    def test_prompt_includes_posting_details(self):
        llm = StubLLM(text="## Om stillingen")
        service = ReasoningService(llm=llm)

        text = service.generate_job_description(
            title="Helsefagarbeider",
            industry="helse-og-omsorg",
            percentage=80,
            location="Bergen",
            requirements="Autorisasjon",
            keywords="turnus",
            company_name="Bergen Omsorg AS",
        )

        assert text == "## Om stillingen"
        call = llm.calls[0]
        assert call["langcode"] == "Norwegian"
        for expected in ("Helsefagarbeider", "helse og omsorg", "80%", "Bergen", "Autorisasjon",
                         "Keywords: turnus", "Company: Bergen Omsorg AS", "## We offer"):
            assert expected in call["prompt"]

    def test_optional_lines_left_out(self):
        llm = StubLLM(text="Annonse")
        ReasoningService(llm=llm).generate_job_description("Tømrer", "bygg", 100, "Oslo", language="en")
        prompt = llm.calls[0]["prompt"]
        assert "Keywords:" not in prompt
        assert "Company:" not in prompt
        assert "in English" in prompt


class TestParseJson:

    def test_strips_code_fence(self):
        assert LLMService._parse_json('```json\n{"score": 70}\n```') == {"score": 70}

    @pytest.mark.parametrize("content", ["not json", "[1, 2]"])
    def test_rejects_non_objects(self, content):
        with pytest.raises(UpstreamServiceError):
            LLMService._parse_json(content)
