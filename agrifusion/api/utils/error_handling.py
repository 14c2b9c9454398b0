"""
Shared error handling utilities for API routes.

Every error leaves the API as ``{"error": ..., "message"?: ..., "details"?: ...}``.
"""
from typing import Any, Optional

from fastapi.responses import JSONResponse

from agrifusion.schemas.common import ErrorResponse


def error_response(
    status_code: int,
    error: str,
    message: Optional[str] = None,
    details: Optional[list[Any]] = None,
) -> JSONResponse:
    """
    Build a JSON error response in the standard envelope.

    Args:
        status_code: HTTP status to return.
        error: Short, user-facing error description.
        message: Optional underlying error message.
        details: Optional list of validation problems.
    """
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )
