"""
Field validation for movie create requests.

All checks run on every request and every failure message is
collected, so a client sees the full list in a single 422 response.
"""

from datetime import date
from typing import List, Optional

from moviehub.api.models.movie import MovieCreate

MIN_YEAR = 1888
MAX_TITLE_LENGTH = 100


def max_year(today: Optional[date] = None) -> int:
    """Latest accepted release year: next calendar year."""
    today = today or date.today()
    return today.year + 1


def validate_movie(movie: MovieCreate, today: Optional[date] = None) -> List[str]:
    """
    Check a decoded create request against the movie field rules.

    Args:
        movie: Decoded request body
        today: Date used for the upper year bound (default: today)

    Returns:
        List of failure messages, empty when the movie is valid
    """
    errors: List[str] = []
    if movie.id < 0:
        errors.append("id must not be negative")

    title = (movie.title or "").strip()

    if not title:
        errors.append("title must not be empty")
    if len(title) > MAX_TITLE_LENGTH:
        errors.append(f"title must not exceed {MAX_TITLE_LENGTH} characters")

    upper = max_year(today)
    if movie.year is None or not MIN_YEAR <= movie.year <= upper:
        errors.append(f"year must be between {MIN_YEAR} and {upper}")

    return errors
