from datetime import datetime, timezone

from complaintdesk.core.store import write_all
from complaintdesk.models.support.complaint_models import Complaint
from complaintdesk.services.homepage.homepage_service import average_response_time

from helpers import auth_header, register, create_admin_and_login, file_complaint


def resolve_and_rate(client, admin, customer, complaint_id, rating):
    client.post(
        f"/complaints/{complaint_id}/respond",
        json={"response": "Sorted", "status": "resolved"},
        headers=auth_header(admin),
    )
    response = client.post(
        f"/complaints/{complaint_id}/rate",
        json={"rating": rating},
        headers=auth_header(customer),
    )
    assert response.status_code == 200, response.text


def test_empty_homepage(client):
    response = client.get("/homepage/data")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["stats"] == {
        "total": 0,
        "resolved": 0,
        "pending": 0,
        "inProgress": 0,
        "satisfaction": "0.0",
        "responseTime": None,
    }
    assert data["recentComplaints"] == []
    assert data["topRatedComplaints"] == []
    assert data["categories"] == {}
    assert data["statusDistribution"] == {
        "pending": 0,
        "inProgress": 0,
        "resolved": 0,
        "closed": 0,
    }


def test_homepage_aggregates(client):
    alice = register(client, "alice")
    admin = create_admin_and_login(client)

    first = file_complaint(client, alice, category="billing", title="one")
    second = file_complaint(client, alice, category="billing", title="two")
    third = file_complaint(client, alice, category="delivery", title="three")
    fourth = file_complaint(client, alice, category="delivery", title="four")

    resolve_and_rate(client, admin, alice, first["id"], 4)
    resolve_and_rate(client, admin, alice, second["id"], 5)
    client.patch(
        f"/complaints/{third['id']}/status",
        json={"status": "in-progress"},
        headers=auth_header(admin),
    )
    client.patch(
        f"/complaints/{fourth['id']}/status",
        json={"status": "closed"},
        headers=auth_header(admin),
    )

    data = client.get("/homepage/data").json()["data"]

    assert data["stats"]["total"] == 4
    assert data["stats"]["resolved"] == 2
    assert data["stats"]["pending"] == 0
    assert data["stats"]["inProgress"] == 1
    assert data["stats"]["satisfaction"] == "4.5"
    # replies were immediate
    assert data["stats"]["responseTime"] == "0h"
    assert data["categories"] == {"billing": 2, "delivery": 2}
    assert data["statusDistribution"] == {
        "pending": 0,
        "inProgress": 1,
        "resolved": 2,
        "closed": 1,
    }
    assert [c["rating"] for c in data["topRatedComplaints"]] == [5, 4]


def test_homepage_is_public_and_redacted(client):
    alice = register(client, "alice")
    file_complaint(client, alice)

    recent = client.get("/homepage/data").json()["data"]["recentComplaints"]

    assert len(recent) == 1
    entry = recent[0]
    assert set(entry) == {
        "id", "title", "category", "status", "createdAt", "updatedAt", "rating",
    }
    assert "description" not in entry
    assert "userName" not in entry


def test_recent_is_capped_and_newest_first(client):
    alice = register(client, "alice")
    titles = [f"issue {n}" for n in range(7)]
    for title in titles:
        file_complaint(client, alice, title=title)

    recent = client.get("/homepage/data").json()["data"]["recentComplaints"]

    assert [c["title"] for c in recent] == list(reversed(titles))[:5]


def test_top_rated_keeps_three(client):
    alice = register(client, "alice")
    admin = create_admin_and_login(client)

    for rating in (2, 5, 3, 4):
        complaint = file_complaint(client, alice, title=f"rated {rating}")
        resolve_and_rate(client, admin, alice, complaint["id"], rating)

    top = client.get("/homepage/data").json()["data"]["topRatedComplaints"]

    assert [c["rating"] for c in top] == [5, 4, 3]
    assert set(top[0]) == {"id", "title", "category", "status", "rating"}


async def test_loaded_records_without_offsets_count_as_utc(client, db):
    await write_all(db, "users", [{
        "id": "u1",
        "username": "alice",
        "password": "$2b$04$stored",
        "name": "Alice",
        "email": "alice@mail.com",
        "role": "customer",
        "createdAt": "2024-03-01T09:00:00",
    }])
    await write_all(db, "complaints", [{
        "id": "c1",
        "userId": "u1",
        "userName": "Alice",
        "title": "Late delivery",
        "description": "A week late",
        "category": "delivery",
        "status": "in-progress",
        "responses": [{
            "id": "r1",
            "adminId": "a1",
            "adminName": "Support",
            "message": "Checking",
            "createdAt": "2024-03-01T12:00:00",
        }],
        "rating": 0,
        "createdAt": "2024-03-01T10:00:00",
        "updatedAt": "2024-03-01T12:00:00",
    }])

    response = client.get("/homepage/data")

    assert response.status_code == 200
    assert response.json()["data"]["stats"]["responseTime"] == "2h"


def test_response_time_accepts_offset_less_thread_entries():
    complaint = Complaint(
        created_at=datetime(2024, 3, 1, 10, tzinfo=timezone.utc),
        responses=[
            {"id": "r0", "message": "hello?", "created_at": "2024-03-01T10:30:00"},
            {
                "id": "r1",
                "message": "On it",
                "admin_name": "Support",
                "created_at": "2024-03-01T15:00:00",
            },
        ],
    )

    assert average_response_time([complaint]) == "5h"
    assert average_response_time([]) is None
