"""
Response envelopes shared by all endpoints.

Successful responses wrap their payload as
``{"success": true, "data": ..., "message": ...}``; failures are
rendered by the exception handlers in ``main`` as
``{"success": false, "error": ..., "details": ...}``.
"""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[List[Any]] = None
