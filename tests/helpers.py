ADMIN_SECRET = "test-admin-secret"
PASSWORD = "pw123"


# -------------------------
# HTTP HELPERS
# -------------------------
def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def register(client, username, name=None):
    response = client.post(
        "/auth/register",
        json={
            "username": username,
            "password": PASSWORD,
            "name": name or username.capitalize(),
            "email": f"{username}@mail.com",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["token"]


def create_admin_and_login(client, username="admin"):
    response = client.post(
        "/auth/admin/create",
        json={
            "username": username,
            "password": PASSWORD,
            "name": username.capitalize(),
            "email": f"{username}@mail.com",
            "adminSecret": ADMIN_SECRET,
        },
    )
    assert response.status_code == 201, response.text

    response = client.post(
        "/auth/login", json={"username": username, "password": PASSWORD}
    )
    return response.json()["data"]["token"]


def file_complaint(client, token, category="billing", title="Double charge"):
    response = client.post(
        "/complaints",
        json={
            "title": title,
            "description": "I was charged twice this month",
            "category": category,
        },
        headers=auth_header(token),
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["complaint"]
