"""Integration tests for auth, session and navigation routes."""

import re

import pytest


def _register(client, email="jane@example.com", password="secret123", full_name="Jane Doe"):
    return client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": password, "full_name": full_name},
    )


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.integration
def test_register_starts_session_with_profile(client):
    """Test that sign-up returns a token and bootstraps the profile."""
    response = _register(client)
    assert response.status_code == 201
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "jane@example.com"

    session = client.get("/api/v1/auth/session", headers=_bearer(body["access_token"])).json()
    assert session["user"]["email"] == "jane@example.com"
    assert session["profile"]["full_name"] == "Jane Doe"
    assert re.fullmatch(r"Anonymous\d{1,4}", session["profile"]["anonymous_name"])
    assert session["is_company_admin"] is False


@pytest.mark.integration
def test_register_duplicate_email(client):
    """Test the backend message is surfaced verbatim."""
    _register(client)
    response = _register(client)

    assert response.status_code == 400
    assert response.json() == {"title": "Error", "detail": "User already registered"}


@pytest.mark.integration
def test_register_short_password(client):
    assert _register(client, password="123").status_code == 422


@pytest.mark.integration
def test_login(client):
    _register(client)
    response = client.post("/api/v1/auth/login", json={"email": "jane@example.com", "password": "secret123"})

    assert response.status_code == 200
    assert response.json()["access_token"]


@pytest.mark.integration
def test_login_wrong_password(client):
    _register(client)
    response = client.post("/api/v1/auth/login", json={"email": "jane@example.com", "password": "nope"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid login credentials"


@pytest.mark.integration
def test_logout_redirects_home_and_ends_session(client):
    """Test sign-out: home redirect and a dead token."""
    token = _register(client).json()["access_token"]

    response = client.post("/api/v1/auth/logout", headers=_bearer(token))
    assert response.status_code == 200
    assert response.json()["redirect"] == "/"

    session = client.get("/api/v1/auth/session", headers=_bearer(token)).json()
    assert session["user"] is None
    assert session["profile"] is None


@pytest.mark.integration
def test_session_without_token(client):
    assert client.get("/api/v1/auth/session").json() == {
        "user": None,
        "profile": None,
        "is_company_admin": False,
    }


@pytest.mark.integration
def test_navigation_signed_out(client):
    body = client.get("/api/v1/navigation").json()

    assert body["signed_in"] is False
    assert [item["name"] for item in body["account_items"]] == ["Log in", "Sign up"]
    assert "Jobs" not in [item["name"] for item in body["items"]]


@pytest.mark.integration
def test_navigation_for_company_admin(client, make_user, make_company, auth_headers):
    """Test that company admins get the dashboard link."""
    user = make_user("hr@acme.com")
    make_company(admin_id=user.id)

    body = client.get("/api/v1/navigation", headers=auth_headers(user)).json()

    assert body["signed_in"] is True
    assert body["email"] == "hr@acme.com"
    assert "Company Dashboard" in [item["name"] for item in body["account_items"]]


@pytest.mark.integration
def test_root_and_health(client):
    assert client.get("/").status_code == 200
    assert client.get("/health").json()["status"] == "healthy"
