"""Compose buffer for a chat input area."""

from typing import Optional

from ...models.chat import MessageDraft


class ComposeBuffer:
    """Text being typed plus an attachment staged for the next send."""

    def __init__(self, text: str = "", attachment_ref: Optional[str] = None):
        self.text = text
        self.attachment_ref = attachment_ref

    def type(self, text: str) -> None:
        self.text = text

    def stage_attachment(self, attachment_ref: Optional[str]) -> None:
        self.attachment_ref = attachment_ref

    def to_draft(self) -> MessageDraft:
        return MessageDraft(text=self.text or None, attachment_ref=self.attachment_ref)

    def clear(self) -> None:
        self.text = ""
        self.attachment_ref = None

    def __repr__(self) -> str:
        return f"ComposeBuffer(text={self.text!r}, attachment_ref={self.attachment_ref!r})"
