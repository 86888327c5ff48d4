"""Attachment upload and download routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import Response

from ..config import Settings, get_settings
from ..logging_config import get_logger
from ..models.chat import AttachmentResponse
from ..services.attachments import DEFAULT_CONTENT_TYPE, AttachmentStore, AttachmentUnavailable, get_attachment_store
from ..services.identity import IdentityContext
from .deps import get_session_context

logger = get_logger(__name__)

router = APIRouter(prefix="/attachments", tags=["attachments"])


async def _read_upload(request: Request, limit: int) -> bytes:
    """Read the request body, stopping as soon as it passes ``limit`` bytes."""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise AttachmentUnavailable(f"Attachment is {declared} bytes, limit is {limit}")

    data = bytearray()
    async for chunk in request.stream():
        data.extend(chunk)
        if len(data) > limit:
            raise AttachmentUnavailable(f"Attachment exceeds the limit of {limit} bytes")
    return bytes(data)


@router.post("", response_model=AttachmentResponse)
async def upload_attachment(
    request: Request,
    x_filename: Optional[str] = Header(default=None),
    context: IdentityContext = Depends(get_session_context),
    store: AttachmentStore = Depends(get_attachment_store),
    settings: Settings = Depends(get_settings),
) -> AttachmentResponse:
    """Upload a file and get a handle to reference from a message."""

    identity = context.current()
    content_type = request.headers.get("content-type") or DEFAULT_CONTENT_TYPE

    try:
        if not settings.attachments_enabled:
            raise AttachmentUnavailable("Attachments disabled")
        data = await _read_upload(request, settings.max_attachment_bytes)
        ref = store.put(data, content_type=content_type, filename=x_filename)
    except AttachmentUnavailable as e:
        logger.warning(f"Attachment upload from {identity.user_id} rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return AttachmentResponse(attachment_ref=ref, content_type=content_type, size=len(data))


@router.get("/{attachment_ref}", dependencies=[Depends(get_session_context)])
async def download_attachment(
    attachment_ref: str,
    store: AttachmentStore = Depends(get_attachment_store),
) -> Response:
    """Download a previously uploaded attachment."""

    attachment = store.get(attachment_ref)
    if attachment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Attachment not found")

    headers = {}
    if attachment.filename:
        headers["Content-Disposition"] = f'inline; filename="{attachment.filename}"'
    return Response(content=attachment.data, media_type=attachment.content_type, headers=headers)


__all__ = ["router"]
