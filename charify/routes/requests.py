"""Help request lookup routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from ..models.request import HelpRequest, HelpRequestListResponse, RequestId
from ..services.request_store import RequestStore, get_request_store

router = APIRouter(prefix="/requests", tags=["requests"])


@router.get("", response_model=HelpRequestListResponse)
async def list_requests(store: RequestStore = Depends(get_request_store)) -> HelpRequestListResponse:
    """List all help requests."""
    return HelpRequestListResponse(requests=store.all())


@router.get("/{request_id}", response_model=HelpRequest)
async def get_request(request_id: int, store: RequestStore = Depends(get_request_store)) -> HelpRequest:
    """Get a single help request."""
    request = store.lookup(RequestId(request_id))
    if request is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Request not found")
    return request


__all__ = ["router"]
