"""Tests for authentication and current user endpoints."""
import pytest
from jose import jwt
from wedding.config import settings
from wedding.services.auth import AuthService


def test_login_success(client, test_user):
    """Test successful login."""
    response = client.post(
        "/api/auth/login",
        json={"code": "234", "name": "username", "password": "testpass"},
    )

    assert response.status_code == 200
    data = response.json()
    assert "token" in data
    assert data["user"]["name"] == "username"
    assert data["user"]["partyId"] == test_user.party_id


def test_login_invalid_password(client, test_user):
    """Test login with wrong password."""
    response = client.post(
        "/api/auth/login",
        json={"code": "234", "name": "username", "password": "wrongpass"},
    )

    assert response.status_code == 401


def test_login_wrong_party_code(client, test_user):
    """Same name under another invitation code is a different guest."""
    response = client.post(
        "/api/auth/login",
        json={"code": "999", "name": "username", "password": "testpass"},
    )

    assert response.status_code == 401


def test_login_user_without_password(client, other_user):
    """Guests created without a password cannot log in."""
    response = client.post(
        "/api/auth/login",
        json={"code": "567", "name": "otheruser", "password": ""},
    )

    assert response.status_code == 401


def test_token_claims(db, test_user):
    """Token carries user id, name and party."""
    token = AuthService(db).create_token(test_user)
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])

    assert payload["sub"] == str(test_user.id)
    assert payload["name"] == "username"
    assert payload["party_id"] == test_user.party_id


def test_decode_invalid_token(db):
    assert AuthService(db).decode_token("not-a-token") is None


def test_get_me(client, test_user, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/users/me", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "username"
    assert data["party"]["code"] == "234"
    assert data["party"]["maxPersonCount"] == 2


def test_get_me_unauthorized(client):
    """Test getting current user without auth."""
    response = client.get("/api/users/me")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_get_me_invalid_token(client):
    response = client.get("/api/users/me", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 401


def test_get_me_deleted_user(client, db, test_user, auth_headers):
    db.delete(test_user)
    db.commit()

    response = client.get("/api/users/me", headers=auth_headers)

    assert response.status_code == 401


def test_party_members_visibility(client, db, test_party, test_user, auth_headers):
    """Hidden party members are not listed, the caller always is."""
    auth = AuthService(db)
    visible = auth.create_user(test_party, "visible", visible_for_others=True)
    auth.create_user(test_party, "hidden")

    response = client.get("/api/users/me/party", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["party"]["code"] == "234"
    assert [m["id"] for m in data["members"]] == [test_user.id, visible.id]
