"""
Domain model for stored movies.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    """A movie record as held by the store."""

    id: int
    title: str
    year: int
