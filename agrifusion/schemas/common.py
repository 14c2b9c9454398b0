"""
Shared response envelopes.
"""
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Standard wrapper for successful responses."""
    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    """Standard error body."""
    error: str
    message: Optional[str] = None
    details: Optional[list[Any]] = None
