"""Chat core services: identity, stores, access control and conversations."""

from .access import AccessController, AccessDecision, authorize
from .attachments import Attachment, AttachmentStore, AttachmentUnavailable, InMemoryAttachmentStore, get_attachment_store
from .chat_store import ChatStore, get_chat_store
from .identity import IdentityContext, get_identity_context
from .request_store import RequestStore, get_request_store

__all__ = [
    "AccessController",
    "AccessDecision",
    "Attachment",
    "AttachmentStore",
    "AttachmentUnavailable",
    "ChatStore",
    "IdentityContext",
    "InMemoryAttachmentStore",
    "RequestStore",
    "authorize",
    "get_attachment_store",
    "get_chat_store",
    "get_identity_context",
    "get_request_store",
]
