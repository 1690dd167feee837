"""Authentication and session endpoint tests."""

from datetime import UTC, datetime, timedelta

from jose import jwt


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/auth/register",
        json={"name": "New User", "email": "newuser@example.com", "password": "password123"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["tokenType"] == "bearer"
    assert data["user"]["email"] == "newuser@example.com"
    assert data["user"]["name"] == "New User"
    assert "passwordHash" not in data["user"]
    assert data["user"]["preferences"] == {
        "currency": "USD",
        "timezone": "UTC",
        "notifications": True,
        "theme": "light",
    }


def test_register_then_login_scenario(client):
    """Register alice, log in with the same password, then with a wrong one."""
    register = client.post(
        "/api/auth/register",
        json={"name": "Alice", "email": "alice@example.com", "password": "Secret123!"},
    )
    assert register.status_code == 201

    login = client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "Secret123!"}
    )
    assert login.status_code == 200
    assert login.json()["token"]
    assert login.json()["user"]["id"] == register.json()["user"]["id"]

    wrong = client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "Secret124!"}
    )
    assert wrong.status_code == 401
    assert wrong.json() == {"message": "Invalid email or password"}


def test_login_token_identifies_user(client, auth_headers, authenticator):
    """The token returned by login carries the user's id."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    claims = authenticator.verify_token(response.json()["token"])
    assert claims.user_id == auth_headers.user_id
    assert claims.email == auth_headers.email


def test_login_errors_do_not_reveal_accounts(client, auth_headers):
    """Wrong password and unknown email produce identical responses."""
    wrong_password = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    unknown_email = client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "wrongpass"}
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_short_wrong_password_is_invalid_credentials(client, auth_headers):
    response = client.post("/api/auth/login", json={"email": auth_headers.email, "password": "x"})
    assert response.status_code == 401


def test_register_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails."""
    response = client.post(
        "/api/auth/register",
        json={"name": "Duplicate", "email": auth_headers.email, "password": "password123"},
    )
    assert response.status_code == 400
    assert "already registered" in response.json()["message"]


def test_email_is_case_insensitive(client, auth_headers):
    """Register and login treat emails case-insensitively."""
    duplicate = client.post(
        "/api/auth/register",
        json={"name": "Shouty", "email": "ALICE@Example.COM", "password": "password123"},
    )
    assert duplicate.status_code == 400

    login = client.post(
        "/api/auth/login", json={"email": "Alice@Example.com", "password": "testpass123"}
    )
    assert login.status_code == 200
    assert login.json()["user"]["email"] == "alice@example.com"


def test_register_validation_error(client):
    """Malformed registrations are rejected with a field-level message."""
    response = client.post(
        "/api/auth/register",
        json={"name": "Shorty", "email": "not-an-email", "password": "short"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["message"].startswith("Invalid request")
    fields = {error["field"] for error in body["errors"]}
    assert {"email", "password"} <= fields


def test_register_name_rules_match_profile(client):
    """A name accepted at registration can be submitted again as a profile update."""
    short = client.post(
        "/api/auth/register",
        json={"name": "A", "email": "a@example.com", "password": "password123"},
    )
    assert short.status_code == 400
    assert {error["field"] for error in short.json()["errors"]} == {"name"}

    registered = client.post(
        "/api/auth/register",
        json={"name": "Al", "email": "al@example.com", "password": "password123"},
    )
    assert registered.status_code == 201
    headers = {"Authorization": f"Bearer {registered.json()['token']}"}
    resubmit = client.put("/api/profile", headers=headers, json={"name": "Al"})
    assert resubmit.status_code == 200


def test_get_current_user(client, auth_headers):
    """Test getting current user information."""
    response = client.get("/api/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == auth_headers.email


def test_validate_user(client, auth_headers):
    response = client.get("/api/user/validate", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id


def test_validate_requires_token(client):
    response = client.get("/api/user/validate")
    assert response.status_code == 401
    assert response.json() == {"message": "Access token required"}
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_garbage_token_rejected(client):
    response = client.get("/api/user/validate", headers={"Authorization": "Bearer not.a.jwt"})
    assert response.status_code == 401


def test_token_signed_with_other_secret_rejected(client, auth_headers):
    forged = jwt.encode(
        {
            "sub": auth_headers.user_id,
            "email": auth_headers.email,
            "exp": int((datetime.now(UTC) + timedelta(hours=1)).timestamp()),
        },
        "some-other-secret",
        algorithm="HS256",
    )
    response = client.get("/api/people", headers={"Authorization": f"Bearer {forged}"})
    assert response.status_code == 401


def test_expired_token_rejected_everywhere(client, auth_headers, authenticator):
    """A token that expired one second ago is refused by every authenticated endpoint."""
    now = datetime.now(UTC)
    issued = now - authenticator.expiration - timedelta(seconds=1)
    expired = authenticator.issue_token(auth_headers.user_id, auth_headers.email, now=issued)
    headers = {"Authorization": f"Bearer {expired}"}

    for path in [
        "/api/auth/me",
        "/api/user/validate",
        "/api/people",
        "/api/gifts",
        "/api/occasions",
        "/api/budgets",
    ]:
        response = client.get(path, headers=headers)
        assert response.status_code == 401, path


def test_token_for_unknown_user_rejected(client, authenticator):
    token = authenticator.issue_token("00000000-0000-0000-0000-000000000000", "ghost@example.com")
    response = client.get("/api/people", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "User not found"


def test_logout(client):
    """Logout needs no token and always succeeds."""
    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}


def test_token_still_valid_after_logout(client, auth_headers):
    """Tokens are not revocable; logout is a client-side discard."""
    client.post("/api/auth/logout", headers=auth_headers)
    response = client.get("/api/user/validate", headers=auth_headers)
    assert response.status_code == 200


def test_unauthorized_access(client):
    """Test that endpoints require authentication."""
    for path in ["/api/people", "/api/gifts", "/api/occasions", "/api/budgets"]:
        assert client.get(path).status_code == 401
        assert client.post(path, json={}).status_code == 401
