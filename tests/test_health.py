# =============================================================================
# tests/test_health.py - Health Endpoint Tests
# =============================================================================
# /os, /live and /ready must answer without touching the database.
# =============================================================================

import socket
from unittest.mock import MagicMock

import pytest

from app.config import Settings
from core.services.planet_service import PlanetRepository


@pytest.fixture
def storeless_client(make_client):
    """Client whose repository fails loudly if anything touches it."""
    collection = MagicMock()
    collection.find_one.side_effect = AssertionError("store must not be used")
    return make_client(PlanetRepository(collection))


class TestLiveness:
    """Tests for GET /live."""

    def test_live(self, storeless_client):
        response = storeless_client.get("/live")

        assert response.status_code == 200
        assert response.json() == {"status": "live"}


class TestReadiness:
    """Tests for GET /ready."""

    def test_ready(self, storeless_client):
        response = storeless_client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}


class TestOSInfo:
    """Tests for GET /os."""

    def test_reports_hostname_and_env(self, storeless_client):
        response = storeless_client.get("/os")

        assert response.status_code == 200
        data = response.json()
        assert data["os"] == socket.gethostname()
        assert data["os"]
        assert data["env"] == "testing"

    def test_env_follows_settings(self, make_client, planet_repository):
        client = make_client(planet_repository, Settings(ENVIRONMENT="production"))

        assert client.get("/os").json()["env"] == "production"
