# tests/test_http_api.py

from __future__ import annotations

from datetime import timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from task_calendar.api.app import create_app

from task_calendar.tasks import task_service

DUE = "2025-01-01T00:00:00.000Z"


def _create(client, **body):
    payload = {"name": "A", "description": "d", **body}
    resp = client.post("/api/tasks", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_list_starts_empty(client) -> None:
    resp = client.get("/api/tasks")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": []}


def test_create_returns_201_with_record(client) -> None:
    resp = client.post("/api/tasks", json={"name": "A", "description": "d"})

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    task = body["data"]
    assert task["name"] == "A"
    assert task["description"] == "d"
    assert task["completed"] is False
    assert "dueDate" not in task
    assert task["createdAt"] == task["updatedAt"] == "2025-01-15T12:00:00.000Z"
    assert task["id"]


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "description": "d"},
        {"name": "A", "description": ""},
        {"description": "d"},
        {},
    ],
)
def test_create_requires_name_and_description(client, payload) -> None:
    resp = client.post("/api/tasks", json=payload)

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Name and description are required"}
    assert client.get("/api/tasks").json()["data"] == []


def test_create_rejects_malformed_body(client) -> None:
    resp = client.post(
        "/api/tasks", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Invalid request body"}

    resp = client.post("/api/tasks", json={"name": 5, "description": "d"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_create_rejects_bad_due_date(client) -> None:
    resp = client.post("/api/tasks", json={"name": "A", "description": "d", "dueDate": "soon"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_due_date_round_trips_through_list(client) -> None:
    created = _create(client, dueDate=DUE)

    listed = client.get("/api/tasks").json()["data"]
    assert [t["id"] for t in listed] == [created["id"]]
    assert listed[0]["dueDate"] == DUE


def test_update_unknown_id_is_404_without_mutation(client) -> None:
    _create(client)
    before = client.get("/api/tasks").json()

    resp = client.put("/api/tasks/missing", json={"name": "B", "description": "e"})

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Task not found"}
    assert client.get("/api/tasks").json() == before


def test_update_requires_name_and_description(client) -> None:
    task = _create(client)
    resp = client.put(f"/api/tasks/{task['id']}", json={"name": "", "description": "e"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Name and description are required"


def test_update_merges_completed_and_due_date(client, clock) -> None:
    task = _create(client, dueDate=DUE)
    url = f"/api/tasks/{task['id']}"

    clock.advance(minutes=1)
    resp = client.put(url, json={"name": "B", "description": "e", "completed": True})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["completed"] is True
    assert data["dueDate"] == DUE
    assert data["createdAt"] == task["createdAt"]
    assert data["updatedAt"] == "2025-01-15T12:01:00.000Z"

    data = client.put(url, json={"name": "B", "description": "e"}).json()["data"]
    assert data["completed"] is True
    assert data["dueDate"] == DUE

    data = client.put(
        url, json={"name": "B", "description": "e", "dueDate": "2025-03-01T00:00:00.000Z"}
    ).json()["data"]
    assert data["dueDate"] == "2025-03-01T00:00:00.000Z"

    data = client.put(url, json={"name": "B", "description": "e", "dueDate": None}).json()["data"]
    assert "dueDate" not in data


def test_delete_then_delete_again(client) -> None:
    task = _create(client)

    resp = client.delete(f"/api/tasks/{task['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": task}
    assert client.get("/api/tasks").json()["data"] == []

    resp = client.delete(f"/api/tasks/{task['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Task not found"}


def test_unexpected_failure_is_generic_500(client, state, monkeypatch) -> None:
    def boom():
        raise RuntimeError("secret internals")

    monkeypatch.setattr(state.task_service, "list_tasks", boom)

    resp = client.get("/api/tasks")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to fetch tasks"}
    assert "secret" not in resp.text


def test_id_conflict_is_500(client, monkeypatch) -> None:
    monkeypatch.setattr(task_service, "new_task_id", lambda: "fixed")

    _create(client)
    resp = client.post("/api/tasks", json={"name": "B", "description": "e"})

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to create task"}
    assert len(client.get("/api/tasks").json()["data"]) == 1


def test_summary_endpoint(client) -> None:
    _create(client, dueDate="2025-01-10T00:00:00.000Z")
    _create(client, dueDate="2025-01-15T20:00:00.000Z")

    resp = client.get("/api/tasks/summary")
    assert resp.status_code == 200
    assert resp.json()["data"] == {
        "total": 2,
        "completed": 0,
        "pending": 2,
        "overdue": 1,
        "dueToday": 1,
    }


def test_calendar_defaults_to_current_month(client) -> None:
    jan = _create(client, dueDate="2025-01-20T10:00:00.000Z")
    _create(client, dueDate="2024-12-31T10:00:00.000Z")
    _create(client)

    resp = client.get("/api/calendar")
    assert resp.status_code == 200
    assert resp.json()["data"] == {"2025-01-20": [jan]}

    dec = client.get("/api/calendar", params={"year": 2024, "month": 12}).json()["data"]
    assert list(dec) == ["2024-12-31"]


def test_calendar_rejects_bad_month(client) -> None:
    resp = client.get("/api/calendar", params={"year": 2025, "month": 13})
    assert resp.status_code == 400
    assert resp.json()["success"] is False

    resp = client.get("/api/calendar", params={"month": "may"})
    assert resp.status_code == 400


def test_health_and_unknown_route(client) -> None:
    _create(client)
    assert client.get("/api/health").json() == {"success": True, "data": {"status": "ok", "tasks": 1}}

    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.json()["success"] is False


@pytest.fixture()
def tokyo_client(state):
    state.calendar_tz = timezone(timedelta(hours=9))
    with TestClient(create_app(state)) as c:
        yield c


@pytest.mark.parametrize("due", ["0001-01-01T00:00:00+01:00", "9999-12-31T23:00:00Z"])
def test_out_of_range_due_date_is_400_and_keeps_queries_working(tokyo_client, due) -> None:
    resp = tokyo_client.post("/api/tasks", json={"name": "A", "description": "d", "dueDate": due})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "dueDate must be a valid ISO-8601 timestamp"}

    task = _create(tokyo_client, dueDate="2025-01-31T23:30:00.000Z")
    resp = tokyo_client.put(
        f"/api/tasks/{task['id']}", json={"name": "A", "description": "d", "dueDate": due}
    )
    assert resp.status_code == 400

    summary = tokyo_client.get("/api/tasks/summary")
    assert summary.status_code == 200
    assert summary.json()["data"]["total"] == 1

    feb = tokyo_client.get("/api/calendar", params={"year": 2025, "month": 2})
    assert feb.status_code == 200
    assert list(feb.json()["data"]) == ["2025-02-01"]
