"""Response envelope shared by every endpoint."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope: ``success`` plus either ``data`` or ``error``."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None


def error_body(message: str) -> dict:
    return {"success": False, "error": message}
