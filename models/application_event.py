"""
Application Event model for the lifecycle audit trail.

One row per persisted status change or privileged field update, written in
the same transaction as the application update it describes.
"""

from datetime import datetime
from typing import Optional, Dict, Any
import uuid

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON


class ApplicationEvent(SQLModel, table=True):
    """
    Attributes:
        action: Lifecycle action (e.g. "submit_answers", "reject") or "raw_update"
        from_status: Status before the write
        to_status: Status after the write
        actor: Who triggered it ("candidate", "company", "admin", "system")
        detail: Extra context, e.g. {"fields": ["score", "status"]} for raw updates
    """
    __tablename__ = "application_events"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    application_id: str = Field(foreign_key="applications.id", index=True)
    action: str = Field(index=True)
    from_status: Optional[str] = None
    to_status: Optional[str] = None
    actor: str = Field(default="system")
    detail: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
