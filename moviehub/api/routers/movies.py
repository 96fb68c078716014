"""
Movie API endpoints.
"""

import logging
import re

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from moviehub.api.dependencies import get_store
from moviehub.api.errors import ApiError, ErrorKind, JSONUTF8Response, unwrap
from moviehub.api.models.movie import MovieCreate, MovieResponse
from moviehub.api.validation import validate_movie
from moviehub.store.models import Movie
from moviehub.store.movie_store import MovieStore

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/movies",
    tags=["movies"],
    default_response_class=JSONUTF8Response,
)

JSON_CONTENT_TYPE = "application/json"

_ID_PATTERN = re.compile(r"\d+", re.ASCII)
_YEAR_PATTERN = re.compile(r"-?\d+", re.ASCII)


def parse_movie_id(raw: str) -> int:
    """
    Parse a path id segment; only non-negative integer literals are ids.

    A literal too long for ``int()`` is well formed but cannot name a stored
    movie (body ids go through the same conversion), so it is reported as
    not found.
    """
    if not _ID_PATTERN.fullmatch(raw):
        raise ApiError(ErrorKind.MALFORMED_INPUT, "movie id must be a non-negative integer")
    try:
        return int(raw)
    except ValueError:
        raise ApiError(ErrorKind.NOT_FOUND)


def parse_year_filter(request: Request) -> int | None:
    """
    Read the ``year`` filter from a non-empty query string.

    Anything other than exactly one integer ``year`` parameter is a
    malformed request. Returns None for an integer literal too long for
    ``int()``; no stored movie can have such a year.
    """
    params = request.query_params
    if set(params.keys()) != {"year"} or len(params.getlist("year")) != 1:
        raise ApiError(ErrorKind.MALFORMED_INPUT, "only the 'year' query parameter is supported")
    raw = params["year"].strip()
    if not _YEAR_PATTERN.fullmatch(raw):
        raise ApiError(ErrorKind.MALFORMED_INPUT, "year must be an integer")
    try:
        return int(raw)
    except ValueError:
        return None


@router.get("", response_model=list[MovieResponse])
def list_movies(request: Request, store: MovieStore = Depends(get_store)):
    """List all movies, or the movies of one year when ``?year=`` is given."""
    if not request.query_params:
        movies = store.list_all()
    else:
        year = parse_year_filter(request)
        movies = [] if year is None else store.list_by_year(year)
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Get movie details by ID."""
    movie = unwrap(store.get(parse_movie_id(movie_id)))
    return MovieResponse.model_validate(movie)


@router.post("", response_model=MovieResponse, status_code=201)
async def create_movie(request: Request, store: MovieStore = Depends(get_store)):
    """Add a new movie after content-type, decode and field checks."""
    content_type = request.headers.get("content-type", "")
    if content_type.strip().lower() != JSON_CONTENT_TYPE:
        raise ApiError(ErrorKind.UNSUPPORTED_MEDIA_TYPE)

    body = await request.body()
    try:
        movie_in = MovieCreate.model_validate_json(body)
    except ValidationError:
        raise ApiError(ErrorKind.MALFORMED_BODY)

    errors = validate_movie(movie_in)
    if errors:
        raise ApiError(ErrorKind.VALIDATION_FAILED, details=errors)

    movie = unwrap(store.create(Movie(id=movie_in.id, title=movie_in.title, year=movie_in.year)))
    logger.info("Created movie %d (%s, %d)", movie.id, movie.title, movie.year)
    return MovieResponse.model_validate(movie)


@router.delete("/{movie_id}", status_code=204)
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Delete a movie by ID."""
    movie = unwrap(store.delete(parse_movie_id(movie_id)))
    logger.info("Deleted movie %d", movie.id)
    return Response(status_code=204)
