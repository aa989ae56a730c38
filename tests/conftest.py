"""Root conftest — shared test configuration."""

import os

# Configure the environment before the application module is imported,
# since it builds a default app at import time.
os.environ.setdefault("API_TOKEN", "test-token")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from fastapi.testclient import TestClient

from taskboard_api.app.core.config import Settings
from taskboard_api.app.main import create_app

TEST_TOKEN = "test-token"


@pytest.fixture
def settings():
    """Settings for an isolated, empty application."""
    return Settings(api_token=TEST_TOKEN, environment="development", seed_demo_data=False)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
def client(app):
    """Create a test client for the isolated application."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
