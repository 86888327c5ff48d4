"""Response utility functions."""

from typing import Any, Optional

from fastapi import status
from fastapi.responses import JSONResponse


def error_response(message: str, status_code: int = status.HTTP_400_BAD_REQUEST, detail: Optional[Any] = None) -> JSONResponse:
    """Create standardized error response."""
    content = {"ok": False, "error": message}
    if detail is not None:
        content["detail"] = detail
    return JSONResponse(content=content, status_code=status_code)
