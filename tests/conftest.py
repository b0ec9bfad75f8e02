"""Shared fixtures: API test client with fresh settings."""

import pytest
from fastapi.testclient import TestClient

from src.api.app import app
from src.config import get_settings


@pytest.fixture
def client():
    """TestClient running the app lifespan (structlog configured)."""
    get_settings.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()
