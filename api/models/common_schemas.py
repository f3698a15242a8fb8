from pydantic import BaseModel, Field
from typing import Optional


class ErrorDetail(BaseModel):
    kind: str = Field(..., description="Stable error kind, e.g. not_found, validation_error, conflict")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Schema for error responses"""
    error: ErrorDetail

    class Config:
        json_schema_extra = {
            "example": {
                "error": {
                    "kind": "validation_error",
                    "message": "Cannot reject an application in status 'hired'"
                }
            }
        }


class NotificationResponse(BaseModel):
    """Outcome of the email sent as part of an action (best effort)."""
    success: bool
    error: Optional[str] = None

    class Config:
        from_attributes = True


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request or action not allowed in the current status"},
    404: {"model": ErrorResponse, "description": "Record not found"},
    409: {"model": ErrorResponse, "description": "Duplicate or concurrently modified record"},
    502: {"model": ErrorResponse, "description": "Reasoning service failed"},
}
