# =============================================================================
# tests/test_users.py - User Account Tests
# =============================================================================
# Tests for registration, login, tokens, password hashing and roles.
# =============================================================================

import pytest

from app.auth import create_access_token, decode_access_token
from app.exceptions import UnauthorizedError
from core.services.user_service import hash_password, verify_password


def register(client, email="Ben@Example.com", password="s3cret!", name="Ben"):
    return client.post("/api/users/register", json={"name": name, "email": email, "password": password})


# =============================================================================
# Password Hashing
# =============================================================================

class TestPasswordHashing:
    """Tests for hash_password / verify_password."""

    def test_roundtrip(self):
        stored = hash_password("s3cret!", iterations=1000)

        assert stored.startswith("pbkdf2_sha256$1000$")
        assert verify_password("s3cret!", stored)
        assert not verify_password("wrong", stored)

    def test_salted(self):
        assert hash_password("same", iterations=1000) != hash_password("same", iterations=1000)

    @pytest.mark.parametrize("stored", ["", "plain-text", "md5$1$aa$bb"])
    def test_malformed_hash(self, stored):
        assert not verify_password("anything", stored)


# =============================================================================
# Tokens
# =============================================================================

class TestTokens:
    """Tests for access token encode/decode."""

    def test_decode_issued_token(self, settings):
        token = create_access_token({"id": "abc", "email": "a@b.co", "role": "admin"}, settings)

        user = decode_access_token(token, settings)

        assert user.id == "abc"
        assert user.is_admin

    def test_wrong_secret_rejected(self, settings):
        token = create_access_token({"id": "abc", "email": "a@b.co"}, settings)
        other = settings.model_copy(update={"JWT_SECRET": "a-different-jwt-secret"})

        with pytest.raises(UnauthorizedError):
            decode_access_token(token, other)

    def test_expired_token_rejected(self, client, settings):
        expired = settings.model_copy(update={"JWT_EXPIRES_MINUTES": -1})
        token = create_access_token({"id": "abc", "email": "a@b.co", "role": "admin"}, expired)

        response = client.get("/api/users", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["message"] == "Token has expired"


# =============================================================================
# Registration and Login
# =============================================================================

class TestRegistration:
    """Tests for /api/users/register and /api/users/login."""

    def test_register_returns_token(self, client):
        response = register(client)

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["email"] == "ben@example.com"
        assert body["user"]["role"] == "customer"
        assert "password_hash" not in body["user"]
        assert body["token"]

    def test_admin_email_bootstraps_admin(self, client):
        body = register(client, email="ADMIN@example.com").json()

        assert body["user"]["role"] == "admin"

    def test_duplicate_email_conflicts(self, client):
        register(client)

        response = register(client, email="ben@example.com")

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_TAKEN"

    def test_short_password_rejected(self, client):
        assert register(client, password="123").status_code == 422

    def test_login(self, client):
        register(client)

        response = client.post("/api/users/login", json={"email": "BEN@example.com", "password": "s3cret!"})

        assert response.status_code == 200
        assert response.json()["user"]["name"] == "Ben"

    def test_login_wrong_password(self, client):
        register(client)

        response = client.post("/api/users/login", json={"email": "ben@example.com", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    def test_me(self, client):
        token = register(client).json()["token"]

        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["email"] == "ben@example.com"


# =============================================================================
# Admin User Management
# =============================================================================

class TestUserAdmin:
    """Tests for listing users and changing roles."""

    def test_list_users(self, client, admin_headers):
        register(client)
        register(client, email="cleo@example.com", name="Cleo")

        response = client.get("/api/users", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["total"] == 2

    def test_promote_user(self, client, admin_headers):
        user = register(client).json()["user"]

        response = client.put(f"/api/users/{user['id']}/role", json={"role": "admin"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["role"] == "admin"

    def test_customer_cannot_promote(self, client, customer_headers):
        user = register(client).json()["user"]

        response = client.put(f"/api/users/{user['id']}/role", json={"role": "admin"}, headers=customer_headers)

        assert response.status_code == 403
