"""Append-only, per-request message logs."""

from datetime import datetime, timezone
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from ..logging_config import get_logger
from ..models.chat import ChatMessage, MessageDraft
from ..models.identity import Role
from ..models.request import RequestId

logger = get_logger(__name__)


class ChatStore:
    """Keeps every request's messages in sequence order for the life of the process.

    Messages are never edited or removed. The store does not check who is
    sending; callers authorize before appending.
    """

    def __init__(self):
        self._logs: Dict[RequestId, List[ChatMessage]] = {}

    def append(self, request_id: RequestId, sender_role: Role, draft: MessageDraft) -> Optional[ChatMessage]:
        """Append a draft as the request's next message.

        Returns None without consuming a sequence number when the draft has
        neither text nor an attachment.
        """
        if draft.is_empty:
            logger.debug(f"Ignoring empty draft for request {request_id}")
            return None

        log = self._logs.setdefault(request_id, [])
        message = ChatMessage(
            request_id=request_id,
            sequence=len(log) + 1,
            sender_role=sender_role,
            text=draft.clean_text,
            attachment_ref=draft.attachment_ref or None,
            timestamp=datetime.now(timezone.utc),
        )
        log.append(message)

        logger.info(f"💬 Request {request_id}: appended message #{message.sequence} from {sender_role.value}")
        return message

    def get(self, request_id: RequestId) -> Tuple[ChatMessage, ...]:
        """Snapshot of a request's messages in ascending sequence order."""
        return tuple(self._logs.get(request_id, ()))

    def count(self, request_id: RequestId) -> int:
        """Number of messages recorded for a request."""
        return len(self._logs.get(request_id, ()))


@lru_cache(maxsize=1)
def get_chat_store() -> ChatStore:
    """Get the global chat store."""
    return ChatStore()
