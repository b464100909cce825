"""
Tests for the HTTP action API

Run: pytest tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from intake_wizard.api import routes
from intake_wizard.main import app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(routes._service, "submit_delay", 0)
    return TestClient(app)


@pytest.fixture
def session_id(client):
    response = client.post("/api/intake/start")
    assert response.status_code == 200
    return response.json()["session_id"]


def _kinds(body):
    return [e["kind"] for e in body["events"]]


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "running" in response.json()["message"]


def test_start_reports_first_step(client):
    body = client.post("/api/intake/start").json()
    assert body["progress"]["label"] == "Step 1 of 6"
    assert body["progress"]["show_submit"] is False
    assert "progress" in _kinds(body)


def test_unknown_session_404(client):
    response = client.post("/api/intake/does-not-exist/navigate", json={"direction": "next"})
    assert response.status_code == 404


def test_next_blocked_then_allowed(client, session_id):
    body = client.post(f"/api/intake/{session_id}/navigate", json={"direction": "next"}).json()
    assert body["accepted"] is False
    assert body["events"][0]["payload"]["severity"] == "warning"

    client.patch(f"/api/intake/{session_id}/fields", json={"age": "70", "gender": "female"})
    body = client.post(f"/api/intake/{session_id}/navigate", json={"direction": "next"}).json()
    assert body["accepted"] is True
    assert body["events"][-1]["payload"]["label"] == "Step 2 of 6"


def test_unknown_field_rejected(client, session_id):
    response = client.patch(f"/api/intake/{session_id}/fields", json={"pulse": "80"})
    assert response.status_code == 422


def test_items_add_and_remove(client, session_id):
    url = f"/api/intake/{session_id}/items/allergies"
    assert client.post(url, json={"value": "Latex"}).json()["accepted"] is True
    assert client.post(url, json={"value": "Latex"}).json()["accepted"] is False

    body = client.delete(f"{url}/3").json()
    assert body["accepted"] is False
    assert body["events"] == []

    body = client.delete(f"{url}/0").json()
    assert body["accepted"] is True
    assert body["events"][0]["payload"] == {"category": "allergies", "items": []}


def test_text_item_into_symptoms_rejected(client, session_id):
    response = client.post(f"/api/intake/{session_id}/items/symptoms", json={"value": "Cough"})
    assert response.status_code == 422
    assert response.json()["detail"] == "symptoms does not hold free-text items"

    state = client.get(f"/api/intake/{session_id}").json()
    assert state["selections"]["symptoms"] == []


def test_state_snapshot(client, session_id):
    client.post(f"/api/intake/{session_id}/symptoms/tag", json={"name": "Nausea"})
    client.post(
        f"/api/intake/{session_id}/medications",
        json={"name": "Ondansetron", "dose": "4mg"},
    )
    client.patch(f"/api/intake/{session_id}/fields", json={"weight": "80", "height": "180"})

    state = client.get(f"/api/intake/{session_id}").json()
    assert state["fields"]["bmi"] == "24.7"
    assert state["selections"]["symptoms"] == [
        {"name": "Nausea", "severity": "moderate", "duration": "unknown"}
    ]
    assert state["selections"]["medications"] == [
        {"name": "Ondansetron", "dose": "4mg", "frequency": "unknown"}
    ]
    assert state["submitting"] is False


def test_submit_flow(client, session_id):
    client.patch(f"/api/intake/{session_id}/fields", json={"age": "70", "gender": "female"})
    client.post(
        f"/api/intake/{session_id}/symptoms",
        json={"name": "Cough", "severity": "severe", "duration": "3 days"},
    )

    body = client.post(f"/api/intake/{session_id}/submit").json()

    assert body["accepted"] is True
    assert [d["icd10"] for d in body["diagnoses"]] == ["J44.1", "J06.9"]
    assert "- Cough (severe, duration: 3 days)" in body["note"]
    assert "NKDA" in body["note"]
    assert "note" in _kinds(body)

    state = client.get(f"/api/intake/{session_id}").json()
    assert state["selections"]["symptoms"] == []
    assert state["progress"]["step"] == 0


def test_submit_refused_without_symptoms(client, session_id):
    client.patch(f"/api/intake/{session_id}/fields", json={"age": "40", "gender": "male"})
    body = client.post(f"/api/intake/{session_id}/submit").json()
    assert body["accepted"] is False
    assert body["note"] is None


def test_tab_click_and_reset(client, session_id):
    assert client.post(f"/api/intake/{session_id}/tabs/3").json()["accepted"] is False

    client.patch(f"/api/intake/{session_id}/fields", json={"age": "40", "gender": "male"})
    assert client.post(f"/api/intake/{session_id}/tabs/1").json()["accepted"] is True

    client.post(f"/api/intake/{session_id}/reset")
    state = client.get(f"/api/intake/{session_id}").json()
    assert state["progress"]["step"] == 0
    assert state["fields"]["age"] == ""


def test_key_shortcut(client, session_id):
    client.patch(f"/api/intake/{session_id}/fields", json={"age": "40", "gender": "male"})
    body = client.post(
        f"/api/intake/{session_id}/keys", json={"key": "ArrowRight", "ctrl": True}
    ).json()
    assert body["accepted"] is True


def test_end_session(client, session_id):
    assert client.delete(f"/api/intake/{session_id}").status_code == 200
    assert client.get(f"/api/intake/{session_id}").status_code == 404


def test_knowledge_base(client):
    body = client.get("/api/diagnoses/knowledge-base").json()
    assert set(body["categories"]) == {"respiratory", "cardiovascular", "gastrointestinal"}
    assert body["triggers"]["cardiovascular"] == ["chest pain", "palpitations"]
    assert body["categories"]["cardiovascular"][0]["icd10"] == "I20.9"


def test_navigate_target_cannot_skip_demographics(client, session_id):
    body = client.post(f"/api/intake/{session_id}/navigate", json={"target_step": 5}).json()
    assert body["accepted"] is False

    state = client.get(f"/api/intake/{session_id}").json()
    assert state["progress"]["step"] == 0
    assert state["fields"]["age"] == ""


def test_action_value_error_maps_to_422(client, session_id):
    def action(session):
        session.update_fields(pulse="80")
        return True

    with pytest.raises(routes.HTTPException) as exc:
        routes._act(session_id, action)
    assert exc.value.status_code == 422
    assert exc.value.detail == "Unknown form field: pulse"
