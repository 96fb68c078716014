"""Movie store - in-memory implementation."""

import threading
from typing import Dict, List

from moviehub.store.models import Movie
from moviehub.store.results import StoreError, StoreResult


class MovieStore:
    """
    Authoritative registry of movies keyed by id.

    Current implementation: In-memory (dict) guarded by a single lock.
    Every public method holds the lock for its whole body, so a
    check-then-act such as create or delete is one critical section.
    """

    def __init__(self):
        self._movies: Dict[int, Movie] = {}
        self._lock = threading.Lock()

    def list_all(self) -> List[Movie]:
        """List all movies."""
        with self._lock:
            return list(self._movies.values())

    def list_by_year(self, year: int) -> List[Movie]:
        """List movies released in exactly ``year``."""
        with self._lock:
            return [movie for movie in self._movies.values() if movie.year == year]

    def get(self, movie_id: int) -> StoreResult[Movie]:
        """Get movie by id."""
        with self._lock:
            movie = self._movies.get(movie_id)
        if movie is None:
            return StoreResult.failure(StoreError.NOT_FOUND)
        return StoreResult.success(movie)

    def create(self, movie: Movie) -> StoreResult[Movie]:
        """Insert a new movie. Fails if the id is already taken."""
        with self._lock:
            if movie.id in self._movies:
                return StoreResult.failure(StoreError.ALREADY_EXISTS)
            self._movies[movie.id] = movie
        return StoreResult.success(movie)

    def delete(self, movie_id: int) -> StoreResult[Movie]:
        """Delete movie by id. Returns the removed movie."""
        with self._lock:
            movie = self._movies.pop(movie_id, None)
        if movie is None:
            return StoreResult.failure(StoreError.NOT_FOUND)
        return StoreResult.success(movie)

    def clear(self) -> None:
        """Remove every movie."""
        with self._lock:
            self._movies.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._movies)
