"""Generic API response envelope model.

Every API response is wrapped in this envelope:
{ status: int, message: str, success: bool, data?: T }

``success`` is the business outcome and ``status`` is the server's own code;
neither is derived from the other, nor from the HTTP status of the transport.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ResponseBody(BaseModel, Generic[T]):
    """JSON envelope for all API responses."""

    status: int
    message: str
    success: bool
    data: T | None = None
