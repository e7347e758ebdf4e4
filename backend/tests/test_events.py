"""
Event endpoint tests — CRUD on the events collection and /my-events.

Writes go through logged_in_client (the gate is covered in
test_access_gate.py); fixtures seed mongomock directly where a test only
needs existing data.
"""

import pytest
from bson import ObjectId

from conftest import MANAGER_EMAIL


@pytest.fixture()
def seeded(database):
    """Three events: two owned by MANAGER_EMAIL, one by someone else."""
    docs = [
        {"title": "Track day", "eventManager": {"email": MANAGER_EMAIL, "name": "M"}},
        {"title": "Night ride", "eventManager": {"email": MANAGER_EMAIL}},
        {"title": "Rally", "eventManager": {"email": "other@example.com"}},
    ]
    result = database.events.insert_many(docs)
    return [str(oid) for oid in result.inserted_ids]


class TestCreateEvent:

    def test_insert_returns_driver_result(self, logged_in_client, database):
        response = logged_in_client.post("/events", json={"title": "Track day", "seats": 12})
        assert response.status_code == 200
        body = response.json()
        assert body["acknowledged"] is True
        assert ObjectId.is_valid(body["insertedId"])

        stored = database.events.find_one({"_id": ObjectId(body["insertedId"])})
        assert stored["title"] == "Track day"
        assert stored["seats"] == 12

    def test_nested_document_kept(self, logged_in_client, database):
        event = {"title": "Track day", "eventManager": {"email": MANAGER_EMAIL, "photo": "p.png"}}
        logged_in_client.post("/events", json=event)
        stored = database.events.find_one({"title": "Track day"})
        assert stored["eventManager"] == {"email": MANAGER_EMAIL, "photo": "p.png"}


class TestReadEvents:

    def test_list_all(self, client, seeded):
        response = client.get("/events")
        assert response.status_code == 200
        body = response.json()
        assert len(body) == 3
        assert {e["_id"] for e in body} == set(seeded)

    def test_list_empty(self, client):
        assert client.get("/events").json() == []

    def test_get_one(self, client, seeded):
        response = client.get(f"/events/{seeded[0]}")
        assert response.status_code == 200
        assert response.json()["title"] == "Track day"
        assert response.json()["_id"] == seeded[0]

    def test_malformed_id_is_400(self, client):
        response = client.get("/events/abc")
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid event ID"

    def test_unknown_id_is_404(self, client, seeded):
        response = client.get(f"/events/{ObjectId()}")
        assert response.status_code == 404
        assert response.json()["error"] == "Event not found"


class TestMyEvents:

    def test_only_exact_owner_matches(self, client, seeded):
        response = client.get("/my-events", params={"email": MANAGER_EMAIL})
        assert response.status_code == 200
        titles = sorted(e["title"] for e in response.json())
        assert titles == ["Night ride", "Track day"]

    def test_match_is_case_sensitive(self, client, seeded):
        response = client.get("/my-events", params={"email": MANAGER_EMAIL.upper()})
        assert response.json() == []

    def test_missing_email_is_400(self, client):
        response = client.get("/my-events")
        assert response.status_code == 400
        assert response.json()["error"] == "Email query parameter is required"

    def test_empty_email_is_400(self, client):
        assert client.get("/my-events", params={"email": ""}).status_code == 400


class TestUpdateEvent:

    def test_partial_update(self, logged_in_client, database, seeded):
        response = logged_in_client.put(f"/events/{seeded[0]}", json={"status": "approved"})
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Event updated successfully"}

        stored = database.events.find_one({"_id": ObjectId(seeded[0])})
        assert stored["status"] == "approved"
        assert stored["title"] == "Track day"

    def test_unchanged_values_still_match(self, logged_in_client, seeded):
        response = logged_in_client.put(f"/events/{seeded[0]}", json={"title": "Track day"})
        assert response.status_code == 200

    def test_unknown_id_is_404(self, logged_in_client, seeded):
        response = logged_in_client.put(f"/events/{ObjectId()}", json={"status": "approved"})
        assert response.status_code == 404

    def test_malformed_id_is_400(self, logged_in_client):
        response = logged_in_client.put("/events/abc", json={"status": "approved"})
        assert response.status_code == 400

    def test_empty_body_is_400(self, logged_in_client, seeded):
        response = logged_in_client.put(f"/events/{seeded[0]}", json={})
        assert response.status_code == 400

    def test_id_field_ignored(self, logged_in_client, database, seeded):
        other = str(ObjectId())
        response = logged_in_client.put(f"/events/{seeded[0]}", json={"_id": other, "status": "x"})
        assert response.status_code == 200
        assert database.events.find_one({"_id": ObjectId(seeded[0])})["status"] == "x"


class TestDeleteEvent:

    def test_delete(self, logged_in_client, database, seeded):
        response = logged_in_client.delete(f"/events/{seeded[2]}")
        assert response.status_code == 200
        assert response.json() == {"acknowledged": True, "deletedCount": 1}
        assert database.events.count_documents({}) == 2

    def test_delete_unknown_reports_zero(self, logged_in_client, seeded):
        response = logged_in_client.delete(f"/events/{ObjectId()}")
        assert response.status_code == 200
        assert response.json()["deletedCount"] == 0

    def test_malformed_id_is_400(self, logged_in_client):
        assert logged_in_client.delete("/events/abc").status_code == 400
