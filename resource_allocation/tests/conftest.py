from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from resource_allocation.application.services.workspace import AllocationWorkspace
from resource_allocation.domain.allocation.entities import Client, Task, Worker
from resource_allocation.main import app


@pytest.fixture
def sample_clients() -> list[Client]:
    return [
        Client(id="C1", name="Acme Corp", priority=8, value=50000),
        Client(id="C2", name="Globex", priority=3, value=12000),
    ]


@pytest.fixture
def sample_workers() -> list[Worker]:
    return [
        Worker(
            id="W1",
            name="Alice",
            skills=["JavaScript", "React"],
            availability=80,
            max_load=3,
        ),
        Worker(id="W2", name="Bob", skills=["Python"], availability=100, max_load=2),
    ]


@pytest.fixture
def sample_tasks() -> list[Task]:
    return [
        Task(
            id="T1",
            name="Build dashboard",
            client_id="C1",
            phases=3,
            skills=["JavaScript", "React"],
            priority=5,
            estimated_hours=40,
        ),
        Task(
            id="T2",
            name="Data pipeline",
            client_id="C2",
            phases=1,
            skills=["Python"],
            priority=3,
            estimated_hours=16,
        ),
    ]


@pytest.fixture
def workspace() -> AllocationWorkspace:
    return AllocationWorkspace(
        column_mapping_min_confidence=0.8, default_priority_weight=25
    )


@pytest.fixture
def client(workspace: AllocationWorkspace) -> Generator[TestClient, None, None]:
    previous = app.state.workspace
    app.state.workspace = workspace
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.state.workspace = previous


@pytest.fixture
def api_prefix() -> str:
    return "/api/v1"
