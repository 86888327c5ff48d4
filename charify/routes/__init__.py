"""API routes for the Charify chat server."""

from fastapi import APIRouter

from .attachments import router as attachments_router
from .chat import router as chat_router
from .requests import router as requests_router

api_router = APIRouter(prefix="/api")

api_router.include_router(requests_router)
api_router.include_router(chat_router)
api_router.include_router(attachments_router)

__all__ = ["api_router"]
