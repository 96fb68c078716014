"""
FastAPI application entry point for the MovieHub catalog API.

Run with::

    uvicorn moviehub.api.main:app --host 0.0.0.0 --port 8080
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moviehub.api.config import (
    get_api_host,
    get_api_port,
    get_log_dir,
    get_log_file,
    get_log_level,
)
from moviehub.api.errors import JSONUTF8Response, register_exception_handlers
from moviehub.api.routers import movies, system, fallback
from moviehub.store.movie_store import MovieStore
from moviehub.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(store: MovieStore | None = None) -> FastAPI:
    """
    Build the API around ``store``.

    The application owns the store for its lifetime; pass one in to share
    or inspect it (tests do), otherwise a fresh empty store is created.
    Logging is left to the entry point; building an app never touches the
    host process's logging handlers.
    """
    app = FastAPI(
        title="MovieHub API",
        description="In-memory movie catalog with JSON endpoints",
        version="1.0.0",
        default_response_class=JSONUTF8Response,
    )
    app.state.store = store if store is not None else MovieStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(movies.router)
    app.include_router(system.router)
    # Catch-all: must stay last
    app.include_router(fallback.router)

    logger.info("MovieHub API ready")
    return app


app = create_app()


if __name__ == "__main__":
    setup_logging(log_file=get_log_file(), level=get_log_level(), log_dir=get_log_dir())
    uvicorn.run(app, host=get_api_host(), port=get_api_port())
