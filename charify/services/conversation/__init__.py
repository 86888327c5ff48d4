"""Conversation management services."""

from .compose import ComposeBuffer
from .service import (
    ConversationDenied,
    ConversationNotFound,
    ConversationResult,
    ConversationService,
    SendResult,
    SendStatus,
)

__all__ = [
    "ComposeBuffer",
    "ConversationDenied",
    "ConversationNotFound",
    "ConversationResult",
    "ConversationService",
    "SendResult",
    "SendStatus",
]
