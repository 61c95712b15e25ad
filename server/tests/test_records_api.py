from __future__ import annotations

from datetime import datetime, timedelta

from meetcross.services.dashboard import MONTH_ABBREVIATIONS


def test_member_crud(client, authorize, staff_profile):
    authorize(staff_profile)

    created = client.post("/members", json={"first_name": "Abel", "last_name": "Bekele", "email": ""})
    assert created.status_code == 201
    member_id = created.json()["id"]
    assert created.json()["email"] is None

    updated = client.put(f"/members/{member_id}", json={"first_name": "Abel", "last_name": "Bekele", "status": "Visitor"})
    assert updated.json()["status"] == "Visitor"
    assert len(client.get("/members").json()) == 1

    assert client.delete(f"/members/{member_id}").status_code == 204
    assert client.get(f"/members/{member_id}").status_code == 404


def test_unknown_records_map_to_not_found(client, authorize, staff_profile):
    authorize(staff_profile)
    response = client.put("/members/missing", json={"first_name": "No", "last_name": "Body"})
    assert response.status_code == 404
    assert response.json()["code"] == "not_found"
    assert client.delete("/families/missing").status_code == 404


def test_invalid_references_map_to_bad_request(client, authorize, staff_profile):
    authorize(staff_profile)
    response = client.post("/members", json={"first_name": "A", "last_name": "B", "family_id": "missing"})
    assert response.status_code == 400
    assert response.json()["code"] == "invalid_record"


def test_family_membership_and_delete(client, authorize, staff_profile, make_member):
    authorize(staff_profile)
    family_id = client.post("/families", json={"family_name": "Bekele Family"}).json()["id"]
    first = make_member("Abel", "Bekele")
    second = make_member("Saba", "Bekele")

    assigned = client.post(f"/families/{family_id}/members", json={"member_ids": [first.id, second.id]})
    assert assigned.status_code == 200
    assert {member["id"] for member in assigned.json()} == {first.id, second.id}

    assert client.delete(f"/families/{family_id}").status_code == 204
    assert all(member["family_id"] is None for member in client.get("/members").json())


def test_event_attendance(client, authorize, staff_profile, sample_member):
    authorize(staff_profile)
    event = client.post("/events", json={"title": "Sunday Service", "date": "2026-03-01T10:00:00"}).json()

    marked = client.put(f"/events/{event['id']}/attendance", json={"member_ids": [sample_member.id]})
    assert marked.status_code == 200
    assert marked.json()["attendance_count"] == 1

    rejected = client.put(f"/events/{event['id']}/attendance", json={"member_ids": ["stranger"]})
    assert rejected.status_code == 400


def test_donations_need_a_finance_role(client, authorize, staff_profile, treasurer_profile):
    gift = {"amount": "500", "date": "2026-03-01", "fund": "Building Fund", "method": "Transfer"}

    authorize(staff_profile)
    assert client.post("/donations", json=gift).status_code == 403

    authorize(treasurer_profile)
    created = client.post("/donations", json=gift)
    assert created.status_code == 201
    assert created.json()["member_id"] is None
    assert client.get("/donations/summary").json()["count"] == 1


def test_non_positive_donation_is_unprocessable(client, authorize, treasurer_profile):
    authorize(treasurer_profile)
    gift = {"amount": "-5", "date": "2026-03-01", "fund": "Tithe", "method": "Cash"}
    assert client.post("/donations", json=gift).status_code == 422


def test_announcement_author_defaults_to_caller(client, authorize, admin_profile):
    authorize(admin_profile)
    created = client.post("/announcements", json={"title": "Picnic", "message": "Saturday at noon"})
    assert created.status_code == 201
    assert created.json()["author"] == "Grace Admin"


def test_users_are_admin_only_and_self_delete_is_refused(client, authorize, admin_profile, staff_profile):
    authorize(staff_profile)
    assert client.get("/users").status_code == 403

    authorize(admin_profile)
    assert len(client.get("/users").json()) == 2
    refused = client.delete(f"/users/{admin_profile.id}")
    assert refused.status_code == 400
    assert client.delete(f"/users/{staff_profile.id}").status_code == 204


def test_settings_default_until_saved(client, authorize, staff_profile):
    authorize(staff_profile)
    assert client.get("/settings").json()["name"] == "My Church"
    assert client.put("/settings", json={"name": "St. Mary"}).status_code == 403


def test_dashboard(client, authorize, staff_profile, make_member, db_session):
    authorize(staff_profile)
    member = make_member("Abel", "Bekele")
    make_member("Saba", "Bekele", status="Visitor")
    past = (datetime.utcnow() - timedelta(days=2)).isoformat()
    future = (datetime.utcnow() + timedelta(days=2)).isoformat()
    client.post("/events", json={"title": "Past", "date": past, "attendee_ids": [member.id]})
    client.post("/events", json={"title": "Soon", "date": future})

    metrics = client.get("/dashboard").json()

    assert metrics["total_members"] == 2
    assert metrics["active_members"] == 1
    assert metrics["upcoming_events"] == 1
    assert metrics["avg_attendance"] == 1
    assert len(metrics["giving_data"]) == 6
    assert metrics["giving_data"][-1]["name"] == MONTH_ABBREVIATIONS[datetime.utcnow().month - 1]


def test_announcement_edit_keeps_its_place(client, authorize, admin_profile, staff_profile):
    authorize(admin_profile)
    created = client.post("/announcements", json={"title": "Picnic", "message": "Saturday", "date": "2026-01-01T09:00:00"})
    announcement_id = created.json()["id"]

    authorize(staff_profile)
    updated = client.put(f"/announcements/{announcement_id}", json={"title": "Picnic", "message": "Sunday instead"})

    assert updated.status_code == 200
    assert updated.json()["date"] == "2026-01-01T09:00:00"
    assert updated.json()["author"] == "Grace Admin"
