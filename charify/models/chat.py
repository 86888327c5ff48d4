"""Chat and conversation models."""

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .identity import Role
from .request import HelpRequest


class MessageDraft(BaseModel):
    """What the user is about to send: text, an attachment handle, or both."""
    model_config = ConfigDict(extra="forbid")

    text: Optional[str] = None
    attachment_ref: Optional[str] = Field(default=None, validation_alias=AliasChoices("attachment_ref", "attachmentRef"))

    @property
    def clean_text(self) -> Optional[str]:
        """Draft text, or None when it is missing or blank."""
        if self.text is None or not self.text.strip():
            return None
        return self.text

    @property
    def is_empty(self) -> bool:
        return self.clean_text is None and not self.attachment_ref


class ChatMessage(BaseModel):
    """A single message in a request's append-only log."""
    model_config = ConfigDict(frozen=True)

    request_id: int
    sequence: int  # 1-based, gap-free per request
    sender_role: Role
    text: Optional[str] = None
    attachment_ref: Optional[str] = None
    timestamp: datetime  # informational; ordering is by sequence


class ConversationView(BaseModel):
    """A help request paired with its ordered message log."""
    request: HelpRequest
    messages: List[ChatMessage]


class ConversationResponse(BaseModel):
    """Response containing a conversation."""
    ok: bool = True
    request: HelpRequest
    summary: str
    messages: List[ChatMessage]


class SendMessageResponse(BaseModel):
    """Response for a send attempt."""
    ok: bool = True
    sent: bool
    message: Optional[ChatMessage] = None


class AttachmentResponse(BaseModel):
    """Response for an attachment upload."""
    ok: bool = True
    attachment_ref: str
    content_type: str
    size: int
