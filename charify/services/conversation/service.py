"""Request-scoped conversations gated by participant role."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ...logging_config import get_logger
from ...models.chat import ChatMessage, ConversationView, MessageDraft
from ...models.identity import UserIdentity
from ...models.request import HelpRequest, RequestId
from ..access import AccessController
from ..attachments import AttachmentStore
from ..chat_store import ChatStore
from ..request_store import RequestStore
from .compose import ComposeBuffer

logger = get_logger(__name__)


class SendStatus(Enum):
    """Outcome of a send attempt."""
    APPENDED = "appended"
    EMPTY = "empty"
    DENIED = "denied"
    NOT_FOUND = "not_found"
    ATTACHMENT_UNAVAILABLE = "attachment_unavailable"


@dataclass(frozen=True)
class SendResult:
    status: SendStatus
    message: Optional[ChatMessage] = None

    @property
    def appended(self) -> bool:
        return self.status is SendStatus.APPENDED


@dataclass(frozen=True)
class ConversationDenied:
    """The identity may not see this conversation. Carries no message data."""
    request_id: RequestId


@dataclass(frozen=True)
class ConversationNotFound:
    """No help request exists with this id."""
    request_id: RequestId


ConversationResult = Union[ConversationView, ConversationDenied, ConversationNotFound]


class ConversationService:
    """Resolves, authorizes and writes conversations for one session identity.

    Lookup and authorization always happen before the message log or the
    draft is touched, so a denied caller learns nothing about the
    conversation beyond the fact that it is denied.
    """

    def __init__(
        self,
        identity: UserIdentity,
        requests: RequestStore,
        chats: ChatStore,
        access: Optional[AccessController] = None,
        attachments: Optional[AttachmentStore] = None,
    ):
        self.identity = identity
        self.requests = requests
        self.chats = chats
        self.access = access or AccessController()
        self.attachments = attachments

    def _admit(self, request_id: RequestId, identity: UserIdentity) -> Union[HelpRequest, SendStatus]:
        """Resolve the request and check the identity may take part in it."""
        request = self.requests.lookup(request_id)
        if request is None:
            logger.info(f"Request {request_id} not found")
            return SendStatus.NOT_FOUND

        decision = self.access.authorize(identity, request)
        if not decision.allowed:
            logger.warning(
                f"🚫 {identity.user_id} ({identity.role.value}) denied access to request {request_id}"
            )
            return SendStatus.DENIED

        return request

    def resolve_conversation(self, request_id: RequestId, identity: Optional[UserIdentity] = None) -> ConversationResult:
        """Return the conversation, or why it cannot be shown."""
        admitted = self._admit(request_id, identity or self.identity)

        if admitted is SendStatus.NOT_FOUND:
            return ConversationNotFound(request_id)
        if admitted is SendStatus.DENIED:
            return ConversationDenied(request_id)

        return ConversationView(request=admitted, messages=list(self.chats.get(request_id)))

    def get_conversation(self, request_id: RequestId) -> ConversationResult:
        """Conversation as seen by this service's identity."""
        return self.resolve_conversation(request_id)

    def send_message(self, request_id: RequestId, draft: MessageDraft) -> SendResult:
        """Append a draft to the request's conversation as the session identity."""
        admitted = self._admit(request_id, self.identity)
        if isinstance(admitted, SendStatus):
            return SendResult(admitted)
        return self._append(request_id, draft)

    def submit(self, request_id: RequestId, buffer: ComposeBuffer) -> SendResult:
        """Send whatever is in the compose buffer.

        The buffer is read only after authorization succeeds and is cleared
        only once the message is in the log.
        """
        admitted = self._admit(request_id, self.identity)
        if isinstance(admitted, SendStatus):
            return SendResult(admitted)

        result = self._append(request_id, buffer.to_draft())
        if result.appended:
            buffer.clear()
        return result

    def _append(self, request_id: RequestId, draft: MessageDraft) -> SendResult:
        if draft.is_empty:
            return SendResult(SendStatus.EMPTY)

        # Without a store no handle can resolve, so any attachment blocks the send
        if draft.attachment_ref:
            if self.attachments is None or not self.attachments.contains(draft.attachment_ref):
                logger.warning(f"Attachment {draft.attachment_ref} unavailable, send to request {request_id} blocked")
                return SendResult(SendStatus.ATTACHMENT_UNAVAILABLE)

        message = self.chats.append(request_id, self.identity.role, draft)
        if message is None:
            return SendResult(SendStatus.EMPTY)
        return SendResult(SendStatus.APPENDED, message)
