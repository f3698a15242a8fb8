"""
Structured AI analysis of a candidate.

Keys are persisted in camelCase (`areasToExplore`, ...) so the stored JSON
matches what the frontend reads; Python code uses snake_case attributes.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class AIAnalysis(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str = ""
    strengths: List[str] = Field(default_factory=list)
    areas_to_explore: List[str] = Field(default_factory=list, alias="areasToExplore")
    suggested_questions: List[str] = Field(default_factory=list, alias="suggestedQuestions")
    red_flags: List[str] = Field(default_factory=list, alias="redFlags")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
