"""
Pydantic schema for error responses.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body; ``details`` is only set for validation errors."""

    status: int
    error: str
    details: list[str] | None = None
