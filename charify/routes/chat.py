"""Chat routes for request-scoped conversations."""

from fastapi import APIRouter, Depends, HTTPException, status

from ..config import Settings, get_settings
from ..logging_config import get_logger
from ..models.chat import ConversationResponse, MessageDraft, SendMessageResponse
from ..models.request import RequestId
from ..services.conversation import (
    ConversationDenied,
    ConversationNotFound,
    ConversationService,
    SendStatus,
)
from .deps import get_conversation_service

logger = get_logger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])

REQUEST_NOT_FOUND = "Request not found"
ACCESS_DENIED = "You are not authorized to view this chat"


@router.get("/{request_id}", response_model=ConversationResponse)
async def get_conversation(
    request_id: int,
    service: ConversationService = Depends(get_conversation_service),
    settings: Settings = Depends(get_settings),
) -> ConversationResponse:
    """Get the conversation for a help request."""

    result = service.get_conversation(RequestId(request_id))

    if isinstance(result, ConversationNotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=REQUEST_NOT_FOUND)
    if isinstance(result, ConversationDenied):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ACCESS_DENIED)

    return ConversationResponse(
        request=result.request,
        summary=result.request.summary(settings.request_summary_length),
        messages=result.messages,
    )


@router.post("/{request_id}", response_model=SendMessageResponse)
async def send_message(
    request_id: int,
    draft: MessageDraft,
    service: ConversationService = Depends(get_conversation_service),
) -> SendMessageResponse:
    """Send a message to a help request's conversation."""

    result = service.send_message(RequestId(request_id), draft)

    if result.status is SendStatus.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=REQUEST_NOT_FOUND)
    if result.status is SendStatus.DENIED:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ACCESS_DENIED)
    if result.status is SendStatus.ATTACHMENT_UNAVAILABLE:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Attachment unavailable")

    # Empty drafts are a silent no-op for the client
    return SendMessageResponse(sent=result.appended, message=result.message)


__all__ = ["router"]
