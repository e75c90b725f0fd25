"""Tests for dataset, validation and search endpoints."""

from fastapi.testclient import TestClient


def _load(client: TestClient, api_prefix: str) -> None:
    client.put(
        f"{api_prefix}/data/clients",
        json={"rows": [{"id": "C1", "name": "Acme Corp", "priority": 8}]},
    )
    client.put(
        f"{api_prefix}/data/workers",
        json={
            "rows": [
                {"id": "W1", "name": "Alice", "skills": ["JavaScript"], "availability": 80}
            ]
        },
    )
    client.put(
        f"{api_prefix}/data/tasks",
        json={
            "rows": [
                {"id": "T1", "name": "UI", "clientId": "C1", "phases": 3,
                 "skills": ["JavaScript"]},
                {"id": "T2", "name": "API", "clientId": "C7", "phases": 1},
            ]
        },
    )


class TestDataRoutes:
    """Test /data endpoints."""

    def test_empty_dataset(self, client: TestClient, api_prefix: str):
        """Test a fresh workspace has no data."""
        body = client.get(f"{api_prefix}/data/").json()
        assert body == {"clients": [], "workers": [], "tasks": [], "hasData": False}

    def test_replace_collection(self, client: TestClient, api_prefix: str):
        """Test edited rows replace a collection and keep extra columns."""
        response = client.put(
            f"{api_prefix}/data/clients",
            json={"rows": [{"id": "C1", "name": "Acme", "region": "EU"}]},
        )
        assert response.status_code == 200
        assert response.json()["clients"] == [
            {"id": "C1", "name": "Acme", "region": "EU"}
        ]

    def test_unknown_collection(self, client: TestClient, api_prefix: str):
        """Test only clients, workers and tasks can be replaced."""
        response = client.put(f"{api_prefix}/data/projects", json={"rows": []})
        assert response.status_code == 422

    def test_reset(self, client: TestClient, api_prefix: str):
        """Test the workspace can be cleared."""
        _load(client, api_prefix)
        assert client.delete(f"{api_prefix}/data/").status_code == 204
        assert client.get(f"{api_prefix}/data/").json()["hasData"] is False


class TestValidationRoutes:
    """Test /validation endpoint."""

    def test_report(self, client: TestClient, api_prefix: str):
        """Test the report lists diagnostics with counts."""
        _load(client, api_prefix)
        body = client.get(f"{api_prefix}/validation/").json()

        assert len(body["errors"]) == 1
        error = body["errors"][0]
        assert error["id"] == "task-T2"
        assert error["type"] == "invalid-reference"
        assert error["field"] == "clientId"
        assert error["entityKind"] == "task"
        assert body["summary"]["byType"] == {"invalid-reference": 1}


class TestSearchRoutes:
    """Test /search endpoint."""

    def test_text_search(self, client: TestClient, api_prefix: str):
        """Test substring search across collections."""
        _load(client, api_prefix)
        body = client.get(f"{api_prefix}/search/", params={"q": "javascript"}).json()
        assert [w["id"] for w in body["workers"]] == ["W1"]
        assert [t["id"] for t in body["tasks"]] == ["T1"]
        assert body["total"] == 2

    def test_phase_search(self, client: TestClient, api_prefix: str):
        """Test the phase-count query."""
        _load(client, api_prefix)
        body = client.get(f"{api_prefix}/search/", params={"q": "phase > 2"}).json()
        assert [t["id"] for t in body["tasks"]] == ["T1"]
        assert body["clients"] == []

    def test_blank_query(self, client: TestClient, api_prefix: str):
        """Test a blank query returns the whole dataset."""
        _load(client, api_prefix)
        body = client.get(f"{api_prefix}/search/").json()
        assert body["total"] == 4


class TestHealth:
    """Test the health endpoint."""

    def test_health(self, client: TestClient, api_prefix: str):
        """Test health reports status and correlation header."""
        response = client.get(
            f"{api_prefix}/health", headers={"X-Correlation-ID": "abc-123"}
        )
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.headers["X-Correlation-ID"] == "abc-123"
