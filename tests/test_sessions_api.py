# tests/test_sessions_api.py
from bson import ObjectId
import pytest


def test_create_session_example(client):
    """POST -> approve -> GET, the way an admin dashboard uses it"""
    created = client.post("/sessions", json={"title": "Algebra", "tutorEmail": "t@x.com", "tutorName": "T"})

    assert created.status_code == 200
    body = created.get_json()
    assert ObjectId.is_valid(body["insertedId"])
    assert body["status"] == "pending"
    assert body["registrationFee"] == 0

    session_id = body["insertedId"]
    approved = client.patch(f"/sessions/{session_id}/approve", json={"isPaid": True, "fee": 20})
    assert approved.status_code == 200
    assert approved.get_json() == {"success": True}

    session = client.get(f"/sessions/{session_id}").get_json()
    assert session["status"] == "approved"
    assert session["registrationFee"] == 20
    assert session["approvedAt"]


def test_create_ignores_client_status_and_fee(client, database):
    response = client.post("/sessions", json={
        "title": "Physics",
        "tutorEmail": "t@x.com",
        "tutorName": "T",
        "status": "approved",
        "registrationFee": 99,
    })

    stored = database.sessions.find_one({"_id": ObjectId(response.get_json()["insertedId"])})
    assert stored["status"] == "pending"
    assert stored["registrationFee"] == 0


def test_create_keeps_schedule_fields(make_session, database):
    session_id = make_session(
        description="Linear equations",
        registrationStart="2025-01-01",
        registrationEnd="2025-01-10",
        classStart="2025-01-15",
        classEnd="2025-02-15",
        duration="10 hours",
    )

    stored = database.sessions.find_one({"_id": ObjectId(session_id)})
    assert stored["classStart"] == "2025-01-15"
    assert stored["duration"] == "10 hours"
    assert stored["tutorName"] == "Tutor"


def test_create_requires_title_and_tutor(client):
    response = client.post("/sessions", json={"title": "Algebra", "tutorEmail": "t@x.com"})

    assert response.status_code == 400
    assert response.get_json() == {"message": "Missing required fields"}


def test_get_session_errors(client):
    assert client.get("/sessions/not-an-id").status_code == 400
    assert client.get("/sessions/not-an-id").get_json() == {"message": "Invalid session ID"}

    missing = client.get(f"/sessions/{ObjectId()}")
    assert missing.status_code == 404
    assert missing.get_json() == {"message": "Session not found"}


def test_get_session_projection_hides_rejection_details(client, make_session):
    session_id = make_session()
    client.patch(f"/sessions/{session_id}/reject", json={"reason": "Too short"})

    session = client.get(f"/sessions/{session_id}").get_json()

    assert session["status"] == "rejected"
    assert "rejectionReason" not in session


def test_list_sessions_filters(client, make_session):
    first = make_session(tutorEmail="a@x.com")
    make_session(tutorEmail="b@x.com")
    client.patch(f"/sessions/{first}/approve", json={"isPaid": False})

    assert len(client.get("/sessions").get_json()) == 2
    assert [s["_id"] for s in client.get("/sessions?status=approved").get_json()] == [first]
    assert len(client.get("/sessions?tutorEmail=b@x.com").get_json()) == 1
    assert client.get("/sessions?status=approved&tutorEmail=b@x.com").get_json() == []


def test_list_sessions_rejects_unknown_status(client):
    response = client.get("/sessions?status=archived")
    assert response.status_code == 400


def test_approved_listing_and_tutor_listing(client, make_session):
    approved = make_session(tutorEmail="a@x.com")
    make_session(tutorEmail="a@x.com")
    client.patch(f"/sessions/{approved}/approve", json={})

    public = client.get("/sessions/approved").get_json()
    mine = client.get("/sessions/tutor/a@x.com").get_json()

    assert [s["_id"] for s in public] == [approved]
    assert len(mine) == 2


def test_approve_free_session_forces_zero_fee(client, make_session, database):
    session_id = make_session()

    client.patch(f"/sessions/{session_id}/approve", json={"isPaid": False, "fee": 50})

    assert database.sessions.find_one({"_id": ObjectId(session_id)})["registrationFee"] == 0


def test_approve_paid_session_needs_valid_fee(client, make_session):
    session_id = make_session()

    missing = client.patch(f"/sessions/{session_id}/approve", json={"isPaid": True})
    negative = client.patch(f"/sessions/{session_id}/approve", json={"isPaid": True, "fee": -5})

    assert missing.status_code == 400
    assert negative.status_code == 400


@pytest.mark.parametrize("fee", ["NaN", "Infinity", "-Infinity"])
@pytest.mark.parametrize("action", ["approve", "status"])
def test_approval_rejects_non_finite_fee(client, make_session, database, fee, action):
    session_id = make_session()
    body = '{"status": "approved", "isPaid": true, "fee": %s}' % fee

    response = client.patch(f"/sessions/{session_id}/{action}", data=body, content_type="application/json")

    assert response.status_code == 400
    stored = database.sessions.find_one({"_id": ObjectId(session_id)})
    assert stored["status"] == "pending"
    assert stored["registrationFee"] == 0


def test_approve_accepts_numeric_string_fee(client, make_session, database):
    session_id = make_session()

    client.patch(f"/sessions/{session_id}/approve", json={"isPaid": True, "fee": "15"})

    assert database.sessions.find_one({"_id": ObjectId(session_id)})["registrationFee"] == 15


def test_approve_only_pending_sessions(client, make_session):
    session_id = make_session()
    client.patch(f"/sessions/{session_id}/approve", json={"isPaid": False})

    again = client.patch(f"/sessions/{session_id}/approve", json={"isPaid": True, "fee": 10})

    assert again.status_code == 404
    assert again.get_json() == {"message": "Session not found or not pending"}


def test_approve_unknown_session(client):
    response = client.patch(f"/sessions/{ObjectId()}/approve", json={})
    assert response.status_code == 404


def test_reject_session(client, make_session, database):
    session_id = make_session()

    response = client.patch(f"/sessions/{session_id}/reject", json={"reason": "Too short", "feedback": "Add more"})

    assert response.get_json() == {"success": True}
    stored = database.sessions.find_one({"_id": ObjectId(session_id)})
    assert stored["status"] == "rejected"
    assert stored["rejectionReason"] == "Too short"
    assert stored["feedback"] == "Add more"
    assert stored["rejectedAt"]

    assert client.patch(f"/sessions/{session_id}/reject", json={}).status_code == 404


def test_status_endpoint_rejects_with_defaults(client, make_session, database):
    session_id = make_session()

    response = client.patch(f"/sessions/{session_id}/status", json={"status": "rejected"})

    assert response.get_json() == {"message": "Session updated to rejected"}
    stored = database.sessions.find_one({"_id": ObjectId(session_id)})
    assert stored["rejectionReason"] == "No reason provided"
    assert stored["feedback"] == ""


def test_status_endpoint_back_to_pending_clears_rejection(client, make_session, database):
    session_id = make_session()
    client.patch(f"/sessions/{session_id}/status", json={"status": "rejected", "rejectionReason": "Vague"})

    response = client.patch(f"/sessions/{session_id}/status", json={"status": "pending"})

    assert response.status_code == 200
    stored = database.sessions.find_one({"_id": ObjectId(session_id)})
    assert stored["status"] == "pending"
    assert stored["rejectionReason"] is None
    assert stored["feedback"] is None


def test_status_endpoint_enforces_transitions(client, make_session):
    session_id = make_session()
    client.patch(f"/sessions/{session_id}/status", json={"status": "rejected"})

    # rejected sessions must go back to pending before approval
    response = client.patch(f"/sessions/{session_id}/status", json={"status": "approved"})

    assert response.status_code == 404
    assert response.get_json() == {"message": "Session not found or cannot move to approved"}


def test_status_endpoint_approval_sets_fee(client, make_session, database):
    session_id = make_session()

    client.patch(f"/sessions/{session_id}/status", json={"status": "approved", "isPaid": True, "fee": 30})

    stored = database.sessions.find_one({"_id": ObjectId(session_id)})
    assert stored["status"] == "approved"
    assert stored["registrationFee"] == 30
    assert stored["approvedAt"]


def test_status_endpoint_validates_status(client, make_session):
    session_id = make_session()

    assert client.patch(f"/sessions/{session_id}/status", json={"status": "done"}).status_code == 400
    assert client.patch(f"/sessions/{session_id}/status", json={}).status_code == 400


def test_resubmit_rejected_session(client, make_session, database):
    session_id = make_session()
    client.patch(f"/sessions/{session_id}/reject", json={"reason": "Too short"})

    response = client.patch(f"/sessions/{session_id}", json={"status": "pending", "title": "Algebra II"})

    assert response.status_code == 200
    assert response.get_json() == {"message": "Session updated", "modifiedCount": 1}
    stored = database.sessions.find_one({"_id": ObjectId(session_id)})
    assert stored["status"] == "pending"
    assert stored["title"] == "Algebra II"
    assert stored["rejectionReason"] is None


def test_resubmit_requires_rejected_session(client, make_session):
    session_id = make_session()

    response = client.patch(f"/sessions/{session_id}", json={"status": "pending"})

    assert response.status_code == 404


def test_edit_cannot_approve(client, make_session):
    session_id = make_session()

    response = client.patch(f"/sessions/{session_id}", json={"status": "approved"})

    assert response.status_code == 400


def test_edit_session_fields(client, make_session, database):
    session_id = make_session()

    response = client.patch(f"/sessions/{session_id}", json={"description": "Now with proofs", "_id": "x"})

    assert response.status_code == 200
    stored = database.sessions.find_one({"_id": ObjectId(session_id)})
    assert stored["description"] == "Now with proofs"
    assert stored["status"] == "pending"
    assert stored["updatedAt"]


def test_edit_session_needs_fields(client, make_session):
    session_id = make_session()
    assert client.patch(f"/sessions/{session_id}", json={}).status_code == 400


def test_delete_session(client, make_session, database):
    session_id = make_session()

    response = client.delete(f"/sessions/{session_id}")

    assert response.status_code == 200
    assert response.get_json() == {"acknowledged": True, "deletedCount": 1}
    assert database.sessions.count_documents({}) == 0

    assert client.delete(f"/sessions/{session_id}").get_json()["deletedCount"] == 0
    assert client.delete("/sessions/bad-id").status_code == 400


def test_edit_session_clears_optional_field_with_null(client, make_session, database):
    session_id = make_session(description="Old text")

    response = client.patch(f"/sessions/{session_id}", json={"description": None, "title": None})

    assert response.status_code == 200
    stored = database.sessions.find_one({"_id": ObjectId(session_id)})
    assert stored["description"] is None
    assert stored["title"] == "Algebra"
