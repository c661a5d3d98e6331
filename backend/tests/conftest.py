"""
Shared fixtures: an in-memory SQLite storage wired into the app.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel

from app.core.database import Storage, get_storage, make_engine
from app.models import Todo  # noqa: F401  registers the todo table
from main import app


@pytest.fixture
def storage():
    """Fresh empty todo table per test."""
    engine = make_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield Storage(engine)
    engine.dispose()


@pytest.fixture
def broken_storage():
    """Storage whose database has no todo table."""
    engine = make_engine("sqlite://")
    yield Storage(engine)
    engine.dispose()


def _client_for(handle):
    app.dependency_overrides[get_storage] = lambda: handle
    return TestClient(app)


@pytest.fixture
def client(storage):
    yield _client_for(storage)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(broken_storage):
    yield _client_for(broken_storage)
    app.dependency_overrides.clear()
