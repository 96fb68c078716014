"""
Tests for error translation and the health endpoint.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from moviehub.api.errors import ApiError, ErrorKind, error_response, unwrap
from moviehub.api.main import create_app
from moviehub.store import Movie, MovieStore, StoreError, StoreResult


class BrokenStore(MovieStore):
    """Store whose reads fail unexpectedly."""

    def list_all(self):
        raise RuntimeError("storage exploded")


class TestUnwrap:

    def test_success_returns_value(self):
        movie = Movie(id=1, title="A", year=2000)
        assert unwrap(StoreResult.success(movie)) == movie

    @pytest.mark.parametrize(
        "store_error,kind,status",
        [
            (StoreError.NOT_FOUND, ErrorKind.NOT_FOUND, 404),
            (StoreError.ALREADY_EXISTS, ErrorKind.ALREADY_EXISTS, 409),
        ],
    )
    def test_failure_raises_matching_kind(self, store_error, kind, status):
        with pytest.raises(ApiError) as exc_info:
            unwrap(StoreResult.failure(store_error))
        assert exc_info.value.kind is kind
        assert exc_info.value.kind.status_code == status


class TestErrorResponse:

    def test_details_only_when_given(self):
        r = error_response(ErrorKind.NOT_FOUND)
        assert r.status_code == 404
        assert r.body == b'{"status":404,"error":"movie not found"}'

    def test_validation_details(self):
        r = error_response(ErrorKind.VALIDATION_FAILED, details=["a", "b"])
        assert r.status_code == 422
        assert r.body == b'{"status":422,"error":"validation error","details":["a","b"]}'
        assert r.headers["content-type"] == "application/json; charset=UTF-8"

    def test_every_kind_has_status(self):
        statuses = {kind.status_code for kind in ErrorKind}
        assert statuses == {400, 404, 405, 409, 415, 422, 500}


class TestInternalErrors:

    def test_unexpected_failure_returns_500(self):
        """An unanticipated exception is reported with its message."""
        client = TestClient(create_app(BrokenStore()), raise_server_exceptions=False)
        r = client.get("/movies")
        assert r.status_code == 500
        assert r.json() == {"status": 500, "error": "storage exploded"}

    def test_unexpected_failure_is_not_logged_by_the_app(self, caplog):
        """The server logs the re-raised traceback; the handler adds no second record."""
        client = TestClient(create_app(BrokenStore()), raise_server_exceptions=False)
        with caplog.at_level(logging.DEBUG, logger="moviehub"):
            assert client.get("/movies").status_code == 500
        assert not [rec for rec in caplog.records
                    if rec.name.startswith("moviehub") and rec.levelno >= logging.ERROR]


class TestHealth:

    def test_health(self, client, store):
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json() == {"status": "healthy", "movies": 0}

        store.create(Movie(id=1, title="A", year=2000))
        assert client.get("/api/health").json()["movies"] == 1

    def test_health_post_not_allowed(self, client):
        assert client.post("/api/health").status_code == 405


class TestCreateApp:

    def test_default_store_is_per_app(self):
        first = create_app()
        second = create_app()
        assert isinstance(first.state.store, MovieStore)
        assert first.state.store is not second.state.store

    def test_create_app_keeps_host_logging(self):
        """Building an app leaves the root logger's handlers in place."""
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            create_app()
            assert handler in root.handlers
        finally:
            root.removeHandler(handler)
