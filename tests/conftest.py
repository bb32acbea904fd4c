# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
#   (in-memory SQLite, temporary upload directory, cheap bcrypt)
# - Recreates the schema for every test
# - Provides a TestClient and helpers for registered users
# =============================================================================

import os
import shutil
import tempfile

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

TEST_UPLOAD_DIR = tempfile.mkdtemp(prefix="lifelog-test-uploads-")

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-that-is-at-least-32-characters"
os.environ["JWT_ISSUER"] = "lifelog-test"
os.environ["JWT_AUDIENCE"] = "lifelog-test-clients"
os.environ["JWT_EXPIRATION_DAYS"] = "7"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["UPLOAD_DIR"] = TEST_UPLOAD_DIR
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient

from app.main import app
from lib.database import Base, engine, init_db


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def fresh_database():
    """Drop and recreate every table so each test starts empty."""
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_upload_dir():
    """Empty the upload directory after each test."""
    yield
    for name in os.listdir(TEST_UPLOAD_DIR):
        path = os.path.join(TEST_UPLOAD_DIR, name)
        if os.path.isdir(path):
            shutil.rmtree(path)
        else:
            os.remove(path)


@pytest.fixture
def client():
    """TestClient with the app's lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """
    Factory that registers a user and returns (response body, auth headers).

    Example:
        body, headers = register_user("kim@example.com")
    """
    def _register(email="kim@example.com", password="secret1", username="Kim"):
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "username": username},
        )
        assert response.status_code == 200, response.text
        body = response.json()
        return body, {"Authorization": f"Bearer {body['token']}"}

    return _register


@pytest.fixture
def auth_headers(register_user):
    """Auth headers for a freshly registered user."""
    _, headers = register_user()
    return headers


@pytest.fixture
def other_headers(register_user):
    """Auth headers for a second, unrelated user."""
    _, headers = register_user(email="lee@example.com", username="Lee")
    return headers
