# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Builds the app around an in-memory MongoDB (mongomock-motor)
# - Issues admin and customer tokens for protected endpoints
#
# Route tests use TestClient without a `with` block, so the lifespan
# (MongoDB ping, Cloudinary setup) does not run.
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from the environment on import

os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-0123456789")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.auth import create_access_token
from app.config import Settings
from app.dependencies import Services
from app.main import create_app
from lib.cloudinary_client import CloudinaryClient
from lib.mongo_client import MongoConnector

ADMIN_EMAIL = "admin@example.com"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Test settings, isolated from any local .env file."""
    return Settings(
        _env_file=None,
        NODE_ENV="test",
        JWT_SECRET="test-jwt-secret-0123456789",
        ADMIN_EMAILS=ADMIN_EMAIL,
        CORS_ORIGINS="*",
        MAX_BODY_SIZE_MB=10,
    )


@pytest.fixture
def services(settings):
    """Service container backed by an in-memory MongoDB."""
    return Services(
        settings=settings,
        mongo=MongoConnector("mongodb://test", "catering_test", client=AsyncMongoMockClient()),
        media=CloudinaryClient("", "", "", folder="catering-test"),
    )


@pytest.fixture
def db(services):
    """The in-memory database, for seeding and inspecting documents."""
    return services.mongo.database


@pytest.fixture
def app(services):
    return create_app(services=services)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_headers(settings):
    """Authorization header for an admin user."""
    token = create_access_token(
        {"id": "64b000000000000000000001", "email": ADMIN_EMAIL, "role": "admin"},
        settings,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def customer_headers(settings):
    """Authorization header for a regular customer."""
    token = create_access_token(
        {"id": "64b000000000000000000002", "email": "ana@example.com", "role": "customer"},
        settings,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def category(client, admin_headers):
    """A stored top-level category."""
    response = client.post(
        "/api/categories",
        json={"name": "Party Platters"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def product(client, admin_headers, category):
    """A stored, orderable product."""
    response = client.post(
        "/api/products",
        json={
            "name": "Veggie Tray",
            "description": "Seasonal vegetables with dip",
            "price": 24.5,
            "category_id": category["id"],
            "stock": 10,
        },
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()
