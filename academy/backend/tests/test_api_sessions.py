from app.db import models


def seed_academy(SessionLocal):
    db = SessionLocal()
    db.add_all(
        [
            models.Location(id="LOC-1", name="Main Hall"),
            models.Location(id="LOC-2", name="Community Court"),
            models.Coach(id="C-1", name="Ravi"),
        ]
    )
    db.flush()
    db.add(models.TrainingClass(id="B-101", name="Beginners", location_id="LOC-1"))
    db.commit()
    db.close()


def test_create_and_list_sessions(api_client):
    client, SessionLocal, _ = api_client
    seed_academy(SessionLocal)

    response = client.post(
        "/api/v1/sessions",
        json={
            "name": "Footwork",
            "class_id": "B-101",
            "coach_id": "C-1",
            "date": "2024-06-03",
            "time": "15.30-17.00",
        },
    )
    assert response.status_code == 200
    assert response.json()["ok"] is True

    listed = client.get("/api/v1/sessions").json()
    assert len(listed) == 1
    assert listed[0]["date"] == "2024-06-03"
    assert listed[0]["status"] == "Active"
    assert listed[0]["class_name"] == "Beginners"
    assert listed[0]["coach_name"] == "Ravi"
    assert listed[0]["location_id"] == "LOC-1"
    assert listed[0]["location_name"] == "Main Hall"


def test_create_session_rejections_are_bad_requests(api_client):
    client, SessionLocal, _ = api_client
    seed_academy(SessionLocal)
    base = {"name": "Footwork", "class_id": "B-101"}

    missing = client.post("/api/v1/sessions", json={"name": "Footwork"})
    invalid = client.post("/api/v1/sessions", json={**base, "date": "32/01/2024"})
    thursday = client.post("/api/v1/sessions", json={**base, "date": "2024-06-06"})

    assert missing.status_code == 400
    assert missing.json()["detail"] == "Session name, batch, and date required"
    assert invalid.status_code == 400
    assert invalid.json()["detail"] == "Invalid session date"
    assert thursday.status_code == 400
    assert thursday.json()["detail"] == "Sessions are blocked on Thursday and Friday"

    client.post(
        "/api/v1/session-blackouts",
        json={"start_date": "2024-06-03", "end_date": "2024-06-03"},
    )
    blocked = client.post("/api/v1/sessions", json={**base, "date": "2024-06-03"})
    assert blocked.status_code == 400
    assert blocked.json()["detail"] == "Sessions are blocked on this date"


def test_update_and_delete_session(api_client):
    client, SessionLocal, _ = api_client
    seed_academy(SessionLocal)
    created = client.post(
        "/api/v1/sessions",
        json={"name": "Footwork", "class_id": "B-101", "date": "2024-06-03"},
    ).json()
    session_id = created["id"]

    friday = client.put(
        f"/api/v1/sessions/{session_id}",
        json={"name": "Footwork", "class_id": "B-101", "date": "2024-06-07"},
    )
    assert friday.status_code == 400

    updated = client.put(
        f"/api/v1/sessions/{session_id}",
        json={
            "name": "Defense",
            "class_id": "B-101",
            "location_id": "LOC-2",
            "date": "2024-06-04",
        },
    )
    assert updated.status_code == 200
    listed = client.get("/api/v1/sessions").json()
    assert listed[0]["name"] == "Defense"
    assert listed[0]["location_id"] == "LOC-2"

    missing = client.put(
        "/api/v1/sessions/999",
        json={"name": "Defense", "class_id": "B-101", "date": "2024-06-04"},
    )
    assert missing.status_code == 404

    assert client.delete(f"/api/v1/sessions/{session_id}").json() == {"ok": True}
    assert client.get("/api/v1/sessions").json() == []


def test_generate_sessions_endpoint(api_client):
    client, SessionLocal, _ = api_client
    seed_academy(SessionLocal)

    response = client.post(
        "/api/v1/sessions/generate",
        json={"start_date": "2024-06-03", "end_date": "2024-06-07", "location_id": "LOC-1"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "created": 6,
        "skipped": 4,
        "skipped_breakdown": {"closed": 4, "blackout": 0, "duplicate": 0},
    }

    backwards = client.post(
        "/api/v1/sessions/generate",
        json={"start_date": "2024-06-07", "end_date": "2024-06-03"},
    )
    assert backwards.status_code == 400
    assert backwards.json()["detail"] == "End date must be after start date"

    missing = client.post("/api/v1/sessions/generate", json={})
    assert missing.status_code == 400


def test_participants_endpoints(api_client):
    client, SessionLocal, _ = api_client
    seed_academy(SessionLocal)
    session_id = client.post(
        "/api/v1/sessions",
        json={"name": "Footwork", "class_id": "B-101", "date": "2024-06-03"},
    ).json()["id"]
    url = f"/api/v1/sessions/{session_id}/participants"

    assert client.post(url, json={"player_id": "P-9", "player_name": "Asha"}).status_code == 200
    assert client.post(url, json={"player_id": "P-9", "player_name": "Asha"}).status_code == 200
    assert client.post(url, json={}).status_code == 400
    assert client.post("/api/v1/sessions/999/participants", json={"player_name": "X"}).status_code == 404

    roster = client.get(url).json()
    assert len(roster) == 1
    assert roster[0]["player_name"] == "Asha"

    assert client.delete(f"{url}/{roster[0]['id']}").json() == {"ok": True}
    assert client.get(url).json() == []


def test_coach_can_read_but_not_write(api_client):
    client, SessionLocal, current = api_client
    seed_academy(SessionLocal)
    current["role"] = models.AdminRole.coach

    assert client.get("/api/v1/sessions").status_code == 200
    assert client.get("/api/v1/session-blackouts").status_code == 200
    assert client.get("/api/v1/activities").status_code == 200

    write = client.post(
        "/api/v1/sessions",
        json={"name": "Footwork", "class_id": "B-101", "date": "2024-06-03"},
    )
    generate = client.post(
        "/api/v1/sessions/generate",
        json={"start_date": "2024-06-03", "end_date": "2024-06-04"},
    )
    assert write.status_code == 403
    assert generate.status_code == 403


def test_health_is_public(api_client):
    client, _, _ = api_client

    assert client.get("/api/v1/health").json() == {"status": "ok"}
