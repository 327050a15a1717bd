"""
API tests for system endpoints and error handling.
"""

from fastapi.testclient import TestClient

from movie_catalog import __version__
from movie_catalog.api.main import create_app
from movie_catalog.core.catalog.store import MovieStore


class FailingStore(MovieStore):
    """Store whose listing blows up, to exercise the 500 handler."""

    def list_movies(self, genre=None):
        raise RuntimeError("disk on fire")


class TestSystemEndpoints:
    """Tests for GET / and GET /health."""

    def test_root(self):
        client = TestClient(create_app(store=MovieStore()))
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/health"

    def test_health(self):
        client = TestClient(create_app(store=MovieStore()))
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"status": "healthy", "version": __version__, "movies": 0}

    def test_default_app_loads_seed(self, monkeypatch):
        monkeypatch.delenv("MOVIES_SEED_PATH", raising=False)
        client = TestClient(create_app())
        assert client.get("/health").json()["movies"] > 0
        assert len(client.get("/movies").json()) == client.get("/health").json()["movies"]


class TestUnexpectedErrors:
    """Tests for the catch-all error handler."""

    def test_unexpected_error_returns_500(self):
        client = TestClient(create_app(store=FailingStore()), raise_server_exceptions=False)
        r = client.get("/movies")
        assert r.status_code == 500
        assert r.json() == {"detail": "Internal server error"}

    def test_unexpected_error_keeps_cors_headers(self):
        app = create_app(store=FailingStore(), allowed_origins=["http://movies.com"])
        client = TestClient(app, raise_server_exceptions=False)
        r = client.get("/movies", headers={"Origin": "http://movies.com"})
        assert r.status_code == 500
        assert r.headers["access-control-allow-origin"] == "http://movies.com"
        assert r.json() == {"detail": "Internal server error"}
