"""Shared route dependencies."""

from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from pydantic import ValidationError

from ..models.identity import UserIdentity
from ..services.attachments import AttachmentStore, get_attachment_store
from ..services.chat_store import ChatStore, get_chat_store
from ..services.conversation import ConversationService
from ..services.identity import IdentityContext
from ..services.request_store import RequestStore, get_request_store


async def get_session_context(
    x_user_id: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None),
) -> IdentityContext:
    """Build the session identity from the headers set by the auth gateway."""
    if not x_user_id or not x_user_role:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing session identity")

    try:
        identity = UserIdentity(user_id=x_user_id, role=x_user_role)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid role: {x_user_role}")

    return IdentityContext(identity)


def get_conversation_service(
    context: IdentityContext = Depends(get_session_context),
    requests: RequestStore = Depends(get_request_store),
    chats: ChatStore = Depends(get_chat_store),
    attachments: AttachmentStore = Depends(get_attachment_store),
) -> ConversationService:
    return ConversationService(
        identity=context.current(),
        requests=requests,
        chats=chats,
        attachments=attachments,
    )
