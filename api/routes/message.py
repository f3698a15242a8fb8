"""
Message API Routes - company/candidate chat.

Endpoints:
- GET /messages?application_id=... - Conversation in order
- POST /messages - Send a message
- POST /messages/read - Mark the other party's messages as read
- GET /messages/unread?application_id=...&reader_role=... - Unread count for the reader
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from api.auth import verify_api_key
from api.dependencies import get_message_service
from api.models.common_schemas import ERROR_RESPONSES
from api.models.message_schemas import (
    MarkReadRequest,
    MarkReadResponse,
    MessageResponse,
    PostMessageRequest,
    UnreadCountResponse,
)
from models.message import SenderRole
from services import MessageService

router = APIRouter(
    prefix="/messages",
    tags=["Messages"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


@router.get("", response_model=List[MessageResponse])
def list_messages(
    application_id: str = Query(..., min_length=1),
    service: MessageService = Depends(get_message_service),
):
    return service.list_messages(application_id)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def post_message(
    request: PostMessageRequest,
    service: MessageService = Depends(get_message_service),
):
    return service.post_message(request.application_id, request.sender_role.value, request.content)


@router.post("/read", response_model=MarkReadResponse)
def mark_read(
    request: MarkReadRequest,
    service: MessageService = Depends(get_message_service),
):
    count = service.mark_read(request.application_id, request.reader_role.value)
    return MarkReadResponse(marked_read=count)


@router.get("/unread", response_model=UnreadCountResponse)
def count_unread(
    application_id: str = Query(..., min_length=1),
    reader_role: SenderRole = Query(...),
    service: MessageService = Depends(get_message_service),
):
    """Number of the other party's messages the reader has not seen yet."""
    count = service.count_unread(application_id, reader_role.value)
    return UnreadCountResponse(application_id=application_id, unread=count)
