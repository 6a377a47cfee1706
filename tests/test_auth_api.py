from helpers import (
    ADMIN_SECRET,
    PASSWORD,
    auth_header,
    register,
    create_admin_and_login,
)


def test_register_returns_user_and_token(client):
    response = client.post(
        "/auth/register",
        json={
            "username": "alice",
            "password": PASSWORD,
            "name": "Alice",
            "email": "alice@mail.com",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["token_type"] == "bearer"
    assert body["data"]["user"]["role"] == "customer"
    assert "password" not in body["data"]["user"]
    assert "password_hash" not in body["data"]["user"]


def test_register_missing_field_is_bad_request(client):
    response = client.post(
        "/auth/register", json={"username": "alice", "password": PASSWORD}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == "VALIDATION_ERROR"


def test_register_blank_field_is_bad_request(client):
    response = client.post(
        "/auth/register",
        json={
            "username": "alice",
            "password": PASSWORD,
            "name": "   ",
            "email": "alice@mail.com",
        },
    )

    assert response.status_code == 400
    assert response.json()["details"] == {"missing": ["name"]}


def test_register_duplicate_username_conflicts(client):
    register(client, "alice")

    response = client.post(
        "/auth/register",
        json={
            "username": "alice",
            "password": "other",
            "name": "Other",
            "email": "other@mail.com",
        },
    )

    assert response.status_code == 409
    assert response.json()["error_code"] == "USERNAME_EXISTS"


def test_login_success_and_failure(client):
    register(client, "alice")

    ok = client.post("/auth/login", json={"username": "alice", "password": PASSWORD})
    wrong = client.post("/auth/login", json={"username": "alice", "password": "nope"})
    ghost = client.post("/auth/login", json={"username": "ghost", "password": PASSWORD})

    assert ok.status_code == 200
    assert ok.json()["data"]["user"]["username"] == "alice"
    assert wrong.status_code == ghost.status_code == 401
    assert wrong.json()["message"] == ghost.json()["message"] == "Invalid credentials"


def test_admin_create_requires_secret(client):
    payload = {
        "username": "root",
        "password": PASSWORD,
        "name": "Root",
        "email": "root@mail.com",
        "adminSecret": "guess",
    }

    denied = client.post("/auth/admin/create", json=payload)
    payload["adminSecret"] = ADMIN_SECRET
    created = client.post("/auth/admin/create", json=payload)

    assert denied.status_code == 403
    assert denied.json()["error_code"] == "ADMIN_SECRET_INVALID"
    assert created.status_code == 201
    assert created.json()["data"]["user"]["role"] == "admin"
    assert "token" not in created.json()["data"]


def test_profile_requires_token(client):
    missing = client.get("/auth/profile")
    malformed = client.get("/auth/profile", headers={"Authorization": "Token abc"})
    bogus = client.get("/auth/profile", headers=auth_header("not-a-jwt"))

    assert missing.status_code == 401
    assert missing.json()["message"] == "Unauthorized: No token provided"
    assert malformed.status_code == 401
    assert bogus.status_code == 401
    assert bogus.json()["error_code"] == "INVALID_TOKEN"


def test_profile_roundtrip(client):
    token = register(client, "alice")

    fetched = client.get("/auth/profile", headers=auth_header(token))
    assert fetched.status_code == 200
    assert fetched.json()["data"]["user"]["name"] == "Alice"

    updated = client.put(
        "/auth/profile",
        json={"name": "Alice Smith", "email": "smith@mail.com"},
        headers=auth_header(token),
    )
    assert updated.status_code == 200
    user = updated.json()["data"]["user"]
    assert user["name"] == "Alice Smith"
    assert user["email"] == "smith@mail.com"
    assert user["username"] == "alice"


def test_profile_password_change(client):
    token = register(client, "alice")

    wrong = client.put(
        "/auth/profile",
        json={
            "name": "Alice",
            "email": "alice@mail.com",
            "currentPassword": "nope",
            "newPassword": "fresh-pw",
        },
        headers=auth_header(token),
    )
    assert wrong.status_code == 401

    changed = client.put(
        "/auth/profile",
        json={
            "name": "Alice",
            "email": "alice@mail.com",
            "currentPassword": PASSWORD,
            "newPassword": "fresh-pw",
        },
        headers=auth_header(token),
    )
    assert changed.status_code == 200

    old = client.post("/auth/login", json={"username": "alice", "password": PASSWORD})
    new = client.post("/auth/login", json={"username": "alice", "password": "fresh-pw"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_admin_token_carries_admin_role(client):
    token = create_admin_and_login(client)

    response = client.get("/auth/profile", headers=auth_header(token))

    assert response.json()["data"]["user"]["role"] == "admin"
