"""
Pydantic schemas for API request/response validation.
"""

from moviehub.api.models.movie import MovieCreate, MovieResponse
from moviehub.api.models.error import ErrorResponse

__all__ = [
    "MovieCreate",
    "MovieResponse",
    "ErrorResponse",
]
