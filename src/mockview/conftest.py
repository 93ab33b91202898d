"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.mockview.main import app
from src.mockview.services.database.utils import SupabaseQueryBuilder


@pytest.fixture
def client() -> Iterator[TestClient]:
    """
    Provide FastAPI test client for API testing.

    Dependency overrides set by a test are cleared afterwards.

    Example:
        >>> def test_health(client):
        >>>     response = client.get("/health")
        >>>     assert response.status_code == 200
    """
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_db() -> MagicMock:
    """Query builder mock; every store call is recorded and nothing hits Supabase."""
    return MagicMock(spec=SupabaseQueryBuilder)
