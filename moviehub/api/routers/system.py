"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from moviehub.api.dependencies import get_store
from moviehub.api.errors import JSONUTF8Response
from moviehub.store.movie_store import MovieStore

router = APIRouter(prefix="/api", tags=["system"], default_response_class=JSONUTF8Response)


@router.get("/health")
def health_check(store: MovieStore = Depends(get_store)):
    """Health check: service is up and how many movies are stored."""
    return {
        "status": "healthy",
        "movies": store.count(),
    }
