from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from models.message import SenderRole


class PostMessageRequest(BaseModel):
    application_id: str = Field(..., min_length=1)
    sender_role: SenderRole
    content: str = Field(..., min_length=1, max_length=5000)


class MarkReadRequest(BaseModel):
    application_id: str = Field(..., min_length=1)
    reader_role: SenderRole = Field(..., description="Role of the reader; the other party's messages are marked read")


class MessageResponse(BaseModel):
    id: str
    application_id: str
    sender_role: str
    content: str
    read_at: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class MarkReadResponse(BaseModel):
    marked_read: int


class UnreadCountResponse(BaseModel):
    application_id: str
    unread: int
