"""
Store module for the movie catalog.

This module provides the movie domain model, the tagged result values
returned by store operations, and the thread-safe in-memory store.
"""

from moviehub.store.models import Movie
from moviehub.store.results import StoreError, StoreResult
from moviehub.store.movie_store import MovieStore

__all__ = [
    'Movie',
    'StoreError',
    'StoreResult',
    'MovieStore',
]
