from datetime import date

from app.db import models


def test_blackout_lifecycle(api_client):
    client, SessionLocal, _ = api_client
    db = SessionLocal()
    db.add(models.Location(id="LOC-1", name="Main Hall"))
    db.add(models.TrainingClass(id="B-101", name="Beginners", location_id="LOC-1"))
    db.add(
        models.PracticeSession(
            name="Session 1",
            class_id="B-101",
            location_id="LOC-1",
            date=date(2024, 6, 4),
            time="15.30-17.00",
        )
    )
    db.commit()
    db.close()

    created = client.post(
        "/api/v1/session-blackouts",
        json={
            "start_date": "2024-06-03",
            "end_date": "2024-06-05",
            "reason": "Tournament",
            "location_id": "LOC-1",
        },
    )
    assert created.status_code == 200
    body = created.json()
    assert body["ok"] is True
    assert body["cancelled"] == 1

    listed = client.get("/api/v1/session-blackouts").json()
    assert len(listed) == 1
    assert listed[0]["start_date"] == "2024-06-03"
    assert listed[0]["location_name"] == "Main Hall"
    assert listed[0]["reason"] == "Tournament"

    sessions = client.get("/api/v1/sessions").json()
    assert sessions[0]["status"] == "Cancelled"
    assert sessions[0]["notes"] == "Cancelled: blackout"

    assert client.delete(f"/api/v1/session-blackouts/{body['id']}").json() == {"ok": True}
    assert client.get("/api/v1/session-blackouts").json() == []
    assert client.get("/api/v1/sessions").json()[0]["status"] == "Cancelled"

    activities = client.get("/api/v1/activities").json()
    assert activities[0]["action"] == "blackout_created"
    assert activities[0]["actor_id"] == 1


def test_blackout_requires_dates(api_client):
    client, _, _ = api_client

    response = client.post("/api/v1/session-blackouts", json={"start_date": "2024-06-03"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Date range required"


def test_supervisor_may_declare_blackouts(api_client):
    client, _, current = api_client
    current["role"] = models.AdminRole.supervisor

    response = client.post(
        "/api/v1/session-blackouts",
        json={"start_date": "2024-06-03", "end_date": "2024-06-03"},
    )

    assert response.status_code == 200
    assert response.json()["cancelled"] == 0

    current["role"] = models.AdminRole.coach
    assert client.delete(f"/api/v1/session-blackouts/{response.json()['id']}").status_code == 403
