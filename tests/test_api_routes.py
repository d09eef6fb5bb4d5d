from fastapi.testclient import TestClient

from src.tracker.application.services import StatisticsService
from src.tracker.presentation.statistics_routes import get_statistics_service
from tests.fakes import TODAY, make_task


def test_create_task_returns_201_with_location(api_client) -> None:
    client, store, _ = api_client

    response = client.post(
        "/api/tasks",
        json={"title": "Book dentist", "userId": "user-1", "priority": "HIGH", "tags": ["health"]},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"]
    assert body["userId"] == "user-1"
    assert body["priority"] == "HIGH"
    assert body["category"] == "OTHER"
    assert body["tags"] == ["health"]
    assert response.headers["location"] == f"/api/tasks/{body['id']}"
    assert body["id"] in store.tasks_by_id


def test_create_task_reports_all_field_errors(api_client) -> None:
    client, store, _ = api_client

    response = client.post("/api/tasks", json={"title": "x", "tags": ["UPPER"]})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert set(body["details"]) == {"title", "userId", "tags"}
    assert store.saved == []


def test_get_unknown_task_returns_404(api_client) -> None:
    client, _, _ = api_client

    response = client.get("/api/tasks/missing")

    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


def test_unhandled_store_failure_returns_structured_500(api_client, monkeypatch) -> None:
    client, store, _ = api_client

    def broken_find_all():
        raise RuntimeError("database is locked")

    monkeypatch.setattr(store, "find_all", broken_find_all)
    lenient = TestClient(client.app, raise_server_exceptions=False)

    response = lenient.get("/api/tasks")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "INTERNAL_ERROR"
    assert body["message"] == "An unexpected error occurred."
    assert body["path"] == "/api/tasks"


def test_list_and_filter_by_user(api_client) -> None:
    client, store, _ = api_client
    store.save(make_task(user_id="alice"))
    store.save(make_task(user_id="bob"))

    assert len(client.get("/api/tasks").json()) == 2
    owned = client.get("/api/tasks/user/alice").json()
    assert [task["userId"] for task in owned] == ["alice"]


def test_list_by_user_rejects_malformed_user_id(api_client) -> None:
    client, _, _ = api_client

    assert client.get("/api/tasks/user/a!").status_code == 422


def test_put_applies_partial_update(api_client) -> None:
    client, store, _ = api_client
    existing = store.save(make_task(title="Old title", tags={"home"}, completed=True))

    response = client.put(
        f"/api/tasks/{existing.id}",
        json={"title": "New title", "tags": [], "dueDate": "2024-07-01"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "New title"
    assert body["tags"] == ["home"]
    assert body["dueDate"] == "2024-07-01"
    assert body["completed"] is False


def test_put_unknown_task_returns_404_without_saving(api_client) -> None:
    client, store, _ = api_client

    response = client.put("/api/tasks/missing", json={"title": "New title"})

    assert response.status_code == 404
    assert store.saved == []


def test_delete_task(api_client) -> None:
    client, store, _ = api_client
    existing = store.save(make_task())

    assert client.delete(f"/api/tasks/{existing.id}").status_code == 204
    assert client.delete(f"/api/tasks/{existing.id}").status_code == 404


def test_task_health(api_client) -> None:
    client, _, _ = api_client

    response = client.get("/api/tasks/health")

    assert response.status_code == 200
    assert response.json() == {"message": "Task Service is running", "status": "UP"}


def test_statistics_endpoint(api_client, sample_tasks) -> None:
    client, _, source = api_client
    source.tasks = sample_tasks
    client.app.dependency_overrides[get_statistics_service] = lambda: StatisticsService(
        source, clock=lambda: TODAY
    )

    response = client.get("/api/statistics")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["completed"] == 1
    assert body["pending"] == 2
    assert body["urgentActive"] == 1
    assert body["overdue"] == 1
    assert body["byPriority"] == {"HIGH": 1, "URGENT": 1, "LOW": 1}
    assert body["byCategory"] == {"WORK": 2, "PERSONAL": 1}


def test_statistics_endpoint_degrades_to_empty(api_client) -> None:
    client, _, source = api_client
    source.available = False

    response = client.get("/api/statistics")

    assert response.status_code == 200
    assert response.json() == {
        "total": 0,
        "completed": 0,
        "pending": 0,
        "urgentActive": 0,
        "overdue": 0,
        "completionRate": 0.0,
        "byPriority": {},
        "byCategory": {},
    }


def test_statistics_health_reports_source_availability(api_client) -> None:
    client, _, source = api_client
    source.available = False

    response = client.get("/api/statistics/health")

    assert response.status_code == 200
    assert response.json() == {
        "service": "Statistics Service",
        "status": "UP",
        "taskServiceAvailable": False,
    }
