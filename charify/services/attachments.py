"""Attachment storage behind opaque handles."""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional

from ..config import get_settings
from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class AttachmentUnavailable(Exception):
    """Raised when a selected attachment cannot be materialized."""


@dataclass(frozen=True)
class Attachment:
    """A stored binary payload."""
    ref: str
    data: bytes
    content_type: str = DEFAULT_CONTENT_TYPE
    filename: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.data)


class AttachmentStore(ABC):
    """Capability for storing attachment payloads.

    Subclasses choose the backing (memory, disk, object storage); the chat
    core only ever sees the handle returned by ``put``.
    """

    @abstractmethod
    def put(self, data: bytes, content_type: str = DEFAULT_CONTENT_TYPE, filename: Optional[str] = None) -> str:
        """Store a payload and return its handle, or raise AttachmentUnavailable."""

    @abstractmethod
    def get(self, ref: str) -> Optional[Attachment]:
        """Return the attachment for a handle, or None when unknown."""

    def contains(self, ref: str) -> bool:
        return self.get(ref) is not None


class InMemoryAttachmentStore(AttachmentStore):
    """Keeps payloads in process memory. Handles are never revoked."""

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        self._attachments: Dict[str, Attachment] = {}

    def put(self, data: bytes, content_type: str = DEFAULT_CONTENT_TYPE, filename: Optional[str] = None) -> str:
        if self.max_bytes <= 0:
            raise AttachmentUnavailable("Attachments disabled")
        if not data:
            raise AttachmentUnavailable("Attachment is empty")
        if len(data) > self.max_bytes:
            raise AttachmentUnavailable(
                f"Attachment is {len(data)} bytes, limit is {self.max_bytes}"
            )

        ref = "att-" + uuid.uuid4().hex
        self._attachments[ref] = Attachment(
            ref=ref,
            data=bytes(data),
            content_type=content_type or DEFAULT_CONTENT_TYPE,
            filename=filename,
        )
        logger.info(f"📎 Stored attachment {ref} ({len(data)} bytes, {filename or 'unnamed'})")
        return ref

    def get(self, ref: str) -> Optional[Attachment]:
        return self._attachments.get(ref)

    def __len__(self) -> int:
        return len(self._attachments)


@lru_cache(maxsize=1)
def get_attachment_store() -> AttachmentStore:
    """Get the global attachment store."""
    return InMemoryAttachmentStore(max_bytes=get_settings().max_attachment_bytes)
