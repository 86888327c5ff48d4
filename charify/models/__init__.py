"""Data models for help requests, identities and chat messages."""

from .chat import (
    AttachmentResponse,
    ChatMessage,
    ConversationResponse,
    ConversationView,
    MessageDraft,
    SendMessageResponse,
)
from .identity import Role, UserIdentity
from .request import HelpRequest, HelpRequestListResponse, RequestId

__all__ = [
    "AttachmentResponse",
    "ChatMessage",
    "ConversationResponse",
    "ConversationView",
    "HelpRequest",
    "HelpRequestListResponse",
    "MessageDraft",
    "RequestId",
    "Role",
    "SendMessageResponse",
    "UserIdentity",
]
