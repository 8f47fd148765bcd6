# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - In-memory fakes for the MongoDB collection (async) and database (sync)
# - A TestClient whose planet repository is the in-memory fake
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds the app at import time from environment settings

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/solarSystem")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.dependencies import get_planet_repository
from app.main import create_app
from core.seed_data import planet_documents
from core.services.planet_service import PlanetRepository


# =============================================================================
# Fakes
# =============================================================================

class FakeAsyncCollection:
    """Minimal stand-in for a motor collection supporting find_one."""

    def __init__(self, documents=None):
        self.documents = [dict(doc) for doc in (documents or [])]

    async def find_one(self, filter, projection=None):
        for doc in self.documents:
            if all(k in doc and doc[k] == v for k, v in filter.items()):
                result = dict(doc)
                if projection and projection.get("_id") == 0:
                    result.pop("_id", None)
                return result
        return None


class FakeInsertManyResult:
    def __init__(self, inserted_ids):
        self.inserted_ids = inserted_ids


class FakeSyncCollection:
    """Minimal stand-in for a pymongo collection."""

    def __init__(self):
        self.documents = []
        self.calls = []

    def drop(self):
        self.calls.append("drop")
        self.documents = []

    def insert_many(self, documents):
        self.calls.append("insert_many")
        start = len(self.documents)
        for i, doc in enumerate(documents):
            doc["_id"] = start + i
            self.documents.append(doc)
        return FakeInsertManyResult([doc["_id"] for doc in documents])

    def count_documents(self, filter):
        return len(self.documents)


class FakeSyncDatabase:
    """Minimal stand-in for a pymongo database with user management commands."""

    def __init__(self, name):
        self.name = name
        self.users = {}
        self.commands = []
        self._collections = {}

    def __getitem__(self, name):
        return self._collections.setdefault(name, FakeSyncCollection())

    def command(self, command, value, **kwargs):
        self.commands.append(command)
        if command == "usersInfo":
            users = [{"user": value}] if value in self.users else []
            return {"users": users, "ok": 1.0}
        if command in ("createUser", "updateUser"):
            self.users[value] = kwargs
            return {"ok": 1.0}
        raise ValueError(f"unexpected command: {command}")


class FakeSyncClient:
    """Dict-like pymongo client that creates databases on first access."""

    def __init__(self):
        self.databases = {}

    def __getitem__(self, name):
        return self.databases.setdefault(name, FakeSyncDatabase(name))


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def seeded_documents():
    """The planet dataset as stored in MongoDB (with _id)."""
    docs = planet_documents()
    for i, doc in enumerate(docs):
        doc["_id"] = f"object-id-{i}"
    return docs


@pytest.fixture
def test_settings():
    """Settings with a fixed environment label."""
    return Settings(ENVIRONMENT="testing")


@pytest.fixture
def planet_repository(seeded_documents):
    """Planet repository backed by an in-memory collection."""
    return PlanetRepository(FakeAsyncCollection(seeded_documents))


@pytest.fixture
def make_client(test_settings):
    """
    Factory for TestClients.

    The lifespan handler is not run, so no MongoDB client is created; the
    repository is injected through dependency_overrides instead.
    """

    def _make(repository, settings=None):
        app = create_app(settings or test_settings)
        app.dependency_overrides[get_planet_repository] = lambda: repository
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_client, planet_repository):
    """TestClient over a seeded in-memory planet collection."""
    return make_client(planet_repository)


@pytest.fixture
def fake_mongo_client():
    """In-memory pymongo client for seed tests."""
    return FakeSyncClient()
