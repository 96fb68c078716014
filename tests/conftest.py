"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from moviehub.api.main import create_app
from moviehub.store.movie_store import MovieStore


@pytest.fixture
def store():
    """Fresh, empty movie store."""
    return MovieStore()


@pytest.fixture
def client(store):
    """TestClient over an app that owns ``store``."""
    return TestClient(create_app(store))
