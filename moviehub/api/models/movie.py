"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel


class MovieCreate(BaseModel):
    """Request body for creating a movie.

    Decoding is strict: unknown fields and type coercion are rejected.
    Range and blank checks on ``title`` and ``year`` are left to
    ``moviehub.api.validation`` so that every failure can be reported.
    """

    id: int
    title: str | None = None
    year: int | None = None

    class Config:
        extra = "forbid"
        strict = True


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: int
    title: str
    year: int

    class Config:
        from_attributes = True
