"""
Integration tests for the /api/users endpoints.
Runs the real use cases against the in-memory user store (no real DB).
"""
import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from user_service.core.config import reset_settings
from user_service.di.container import reset_container
from user_service.main import create_application

pytestmark = pytest.mark.integration

BUSTER = {
    "username": "busterblade",
    "password": "password123",
    "email": "buster@example.com",
    "fullName": "Buster Blade",
}


@pytest.fixture
def client():
    """Create test client backed by a fresh in-memory store."""
    with TestClient(create_application()) as c:
        yield c


@pytest.fixture
def hal_client():
    with patch.dict(os.environ, {"HYPERMEDIA_ENABLED": "true"}):
        reset_settings()
        reset_container()
        with TestClient(create_application()) as c:
            yield c


def _register(client, **overrides):
    body = {**BUSTER, **overrides}
    return client.post("/api/users/register", json=body)


class TestRegister:
    """Tests for POST /api/users/register"""

    def test_register_success(self, client):
        response = _register(client)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] is not None
        assert data["username"] == "busterblade"
        assert data["email"] == "buster@example.com"
        assert data["fullName"] == "Buster Blade"
        assert "password" not in data
        assert "hashed_password" not in data

    def test_client_supplied_id_is_ignored(self, client):
        response = _register(client, id=999)

        assert response.status_code == 201
        assert response.json()["id"] != 999

    def test_duplicate_username_returns_400(self, client):
        _register(client)

        response = _register(client, email="other@example.com")

        assert response.status_code == 400
        assert response.text == "El nombre de usuario ya existe."
        assert len(client.get("/api/users").json()) == 1

    def test_duplicate_email_returns_400(self, client):
        _register(client)

        response = _register(client, username="someoneelse")

        assert response.status_code == 400
        assert response.text == "El correo electrónico ya está registrado."

    def test_missing_fields_rejected(self, client):
        response = client.post("/api/users/register", json={"username": "x"})

        assert response.status_code == 422

    def test_password_longer_than_72_bytes_rejected(self, client):
        response = _register(client, password="a" * 100)

        assert response.status_code == 422
        assert client.get("/api/users").json() == []

    def test_multibyte_password_measured_in_bytes(self, client):
        # 37 two-byte characters is 74 bytes
        response = _register(client, password="ñ" * 37)

        assert response.status_code == 422

    def test_password_of_72_bytes_accepted(self, client):
        _register(client, password="a" * 72)

        response = client.post(
            "/api/users/login", json={"username": "busterblade", "password": "a" * 72}
        )

        assert response.status_code == 200


class TestReadAndDelete:
    """Tests for GET and DELETE"""

    def test_list_users(self, client):
        _register(client)
        _register(client, username="ana", email="ana@example.com")

        response = client.get("/api/users")

        assert response.status_code == 200
        assert [user["username"] for user in response.json()] == ["busterblade", "ana"]

    def test_get_unknown_user_returns_404(self, client):
        assert client.get("/api/users/12345").status_code == 404

    def test_get_then_delete(self, client):
        user_id = _register(client).json()["id"]

        assert client.get(f"/api/users/{user_id}").status_code == 200

        first = client.delete(f"/api/users/{user_id}")
        second = client.delete(f"/api/users/{user_id}")

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 204
        assert client.get(f"/api/users/{user_id}").status_code == 404


class TestUpdate:
    """Tests for PUT /api/users/{id}"""

    def test_update_replaces_fields_and_ignores_password(self, client):
        user_id = _register(client).json()["id"]

        response = client.put(
            f"/api/users/{user_id}",
            json={
                "username": "buster2",
                "email": "buster2@example.com",
                "fullName": "Buster Two",
                "password": "ignored-new-password",
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": user_id,
            "username": "buster2",
            "email": "buster2@example.com",
            "fullName": "Buster Two",
        }

        old_password = client.post(
            "/api/users/login", json={"username": "buster2", "password": "password123"}
        )
        new_password = client.post(
            "/api/users/login", json={"username": "buster2", "password": "ignored-new-password"}
        )
        assert old_password.status_code == 200
        assert new_password.status_code == 401

    def test_update_unknown_user_returns_404(self, client):
        response = client.put(
            "/api/users/777", json={"username": "x", "email": "x@example.com"}
        )

        assert response.status_code == 404

    def test_update_to_taken_username_returns_400(self, client):
        _register(client)
        other_id = _register(client, username="ana", email="ana@example.com").json()["id"]

        response = client.put(
            f"/api/users/{other_id}",
            json={"username": "busterblade", "email": "ana@example.com"},
        )

        assert response.status_code == 400
        assert response.text == "El nombre de usuario ya existe."


class TestLogin:
    """Tests for POST /api/users/login"""

    def test_login_success(self, client):
        _register(client)

        response = client.post(
            "/api/users/login", json={"username": "busterblade", "password": "password123"}
        )

        assert response.status_code == 200
        assert response.text == "Inicio de sesión exitoso para busterblade"

    def test_login_wrong_password_returns_401(self, client):
        _register(client)

        response = client.post(
            "/api/users/login", json={"username": "busterblade", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.text == "Credenciales inválidas"

    def test_login_unknown_user_returns_401(self, client):
        response = client.post("/api/users/login", json={"username": "nouser", "password": "x"})

        assert response.status_code == 401
        assert response.text == "Credenciales inválidas"

    @pytest.mark.parametrize(
        "credentials",
        [
            {"username": "", "password": "password123"},
            {"username": "busterblade", "password": ""},
            {"username": "", "password": ""},
        ],
    )
    def test_login_empty_credentials_return_401(self, client, credentials):
        _register(client)

        response = client.post("/api/users/login", json=credentials)

        assert response.status_code == 401
        assert response.text == "Credenciales inválidas"

    def test_login_overlong_password_returns_401(self, client):
        _register(client)

        response = client.post(
            "/api/users/login", json={"username": "busterblade", "password": "a" * 100}
        )

        assert response.status_code == 401


class TestHypermedia:
    """Tests for HAL envelopes when HYPERMEDIA_ENABLED=true"""

    def test_registered_user_has_self_link(self, hal_client):
        response = _register(hal_client)
        data = response.json()

        assert response.status_code == 201
        assert data["_links"] == {"self": {"href": f"http://testserver/api/users/{data['id']}"}}

    def test_get_user_links_back_to_collection(self, hal_client):
        user_id = _register(hal_client).json()["id"]

        data = hal_client.get(f"/api/users/{user_id}").json()

        assert data["_links"]["users"] == {"href": "http://testserver/api/users"}

    def test_list_is_embedded(self, hal_client):
        _register(hal_client)

        data = hal_client.get("/api/users").json()

        assert [user["username"] for user in data["_embedded"]["users"]] == ["busterblade"]
        assert data["_links"]["self"]["href"] == "http://testserver/api/users"


class TestInfrastructureErrors:
    """Store failures surface as 500 without driver details"""

    def test_store_failure_returns_500(self, client):
        from user_service.di.container import get_container
        from user_service.domain.repositories.user_repository import UserRepository

        repository = get_container().get(UserRepository)
        with patch.object(repository, "find_all", side_effect=RuntimeError("Error listing users: boom")):
            response = client.get("/api/users")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
