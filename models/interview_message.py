"""
Interview transcript entry.

Stored inside Application.interview_transcript as plain dicts; this model is
the typed view used by the interview planner and the reasoning service.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class InterviewRole(str, Enum):
    ASSISTANT = "assistant"
    USER = "user"


class InterviewMessage(BaseModel):
    role: InterviewRole
    content: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    def to_json(self) -> dict:
        """Serialize for the JSON transcript column."""
        return {
            "role": self.role.value,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_json(cls, data: dict) -> "InterviewMessage":
        return cls.model_validate(data)
