"""
Dataset Validator

Pure checks over the three entity collections. Each function walks its
collection once, in input order, and returns the diagnostics it found; it
never raises and never mutates its input. Callers recompute from scratch
whenever any collection changes.
"""

from collections import Counter
from collections.abc import Sequence
from typing import Any

from ..entities.records import Client, Record, Task, Worker
from ..value_objects.diagnostics import ValidationDiagnostic, ValidationSummary
from ..value_objects.enums import DiagnosticType

CLIENT_PRIORITY_RANGE = (1, 10)
WORKER_AVAILABILITY_RANGE = (0, 100)
MIN_TASK_PHASES = 1


class _DiagnosticCollector:
    """Accumulates diagnostics for one validator call."""

    def __init__(self) -> None:
        self.diagnostics: list[ValidationDiagnostic] = []

    def add(
        self,
        record: Record,
        diagnostic_type: DiagnosticType,
        message: str,
        field: str,
        value: Any = None,
        suggestion: str | None = None,
    ) -> None:
        key = record.diagnostic_key
        self.diagnostics.append(
            ValidationDiagnostic(
                id=key,
                type=diagnostic_type,
                message=message,
                field=field,
                value=value,
                suggestion=suggestion,
                entity_kind=record.kind,
                entity_id=record.id,
                diagnostic_id=f"{key}#{len(self.diagnostics)}",
            )
        )

    def check_identity(self, record: Record, seen_ids: set[str]) -> None:
        """Flag repeated ids (never the first occurrence) and missing names."""
        label = record.kind.value
        if record.id in seen_ids:
            self.add(
                record,
                DiagnosticType.DUPLICATE_ID,
                f"Duplicate {label} ID: {record.id}",
                field="id",
                value=record.id,
            )
        seen_ids.add(record.id)

        if not record.name:
            self.add(
                record,
                DiagnosticType.MISSING_COLUMN,
                f"Missing name for {label} {record.id}",
                field="name",
            )


def _outside(value: int | float | None, low: float, high: float) -> bool:
    return value is not None and (value < low or value > high)


def validate_clients(
    clients: Sequence[Client], tasks: Sequence[Task] | None = None
) -> list[ValidationDiagnostic]:
    """
    Validate client records.

    Args:
        clients: Client collection in upload order
        tasks: Accepted for future client/task cross-checks; currently unused

    Returns:
        Diagnostics in the order the offending clients appear
    """
    collector = _DiagnosticCollector()
    seen_ids: set[str] = set()
    low, high = CLIENT_PRIORITY_RANGE

    for client in clients:
        collector.check_identity(client, seen_ids)

        if _outside(client.priority, low, high):
            collector.add(
                client,
                DiagnosticType.OUT_OF_RANGE,
                f"Priority must be between {low}-{high} for client {client.id}",
                field="priority",
                value=client.priority,
                suggestion=f"Set priority to a value between {low} and {high}",
            )

    return collector.diagnostics


def validate_workers(workers: Sequence[Worker]) -> list[ValidationDiagnostic]:
    """Validate worker records: ids, names and availability percentage."""
    collector = _DiagnosticCollector()
    seen_ids: set[str] = set()
    low, high = WORKER_AVAILABILITY_RANGE

    for worker in workers:
        collector.check_identity(worker, seen_ids)

        if _outside(worker.availability, low, high):
            collector.add(
                worker,
                DiagnosticType.OUT_OF_RANGE,
                f"Availability must be between {low}-{high} for worker {worker.id}",
                field="availability",
                value=worker.availability,
                suggestion=f"Set availability to a percentage between {low} and {high}",
            )

    return collector.diagnostics


def validate_tasks(
    tasks: Sequence[Task], clients: Sequence[Client], workers: Sequence[Worker]
) -> list[ValidationDiagnostic]:
    """
    Validate task records against the client and worker collections.

    Besides id/name checks, every task must reference an existing client and
    every skill it lists must be held by at least one worker. One
    ``missing-skill`` diagnostic is produced per unavailable skill.
    """
    collector = _DiagnosticCollector()
    seen_ids: set[str] = set()
    client_ids = {client.id for client in clients}
    worker_skills = {skill for worker in workers for skill in worker.skills}

    for task in tasks:
        collector.check_identity(task, seen_ids)

        if task.client_id not in client_ids:
            collector.add(
                task,
                DiagnosticType.INVALID_REFERENCE,
                f"Task {task.id} references non-existent client {task.client_id}",
                field="clientId",
                value=task.client_id,
                suggestion="Check client ID or add missing client",
            )

        for skill in task.skills:
            if skill not in worker_skills:
                collector.add(
                    task,
                    DiagnosticType.MISSING_SKILL,
                    f"Task {task.id} requires skill '{skill}' but no worker has it",
                    field="skills",
                    value=skill,
                    suggestion="Add worker with this skill or modify task requirements",
                )

        if task.phases is not None and task.phases < MIN_TASK_PHASES:
            collector.add(
                task,
                DiagnosticType.OUT_OF_RANGE,
                f"Task {task.id} must have at least {MIN_TASK_PHASES} phase",
                field="phases",
                value=task.phases,
                suggestion=f"Set phases to at least {MIN_TASK_PHASES}",
            )

    return collector.diagnostics


def validate_all(
    clients: Sequence[Client], workers: Sequence[Worker], tasks: Sequence[Task]
) -> list[ValidationDiagnostic]:
    """Run every validator; client, then worker, then task diagnostics."""
    return [
        *validate_clients(clients, tasks),
        *validate_workers(workers),
        *validate_tasks(tasks, clients, workers),
    ]


def summarize(diagnostics: Sequence[ValidationDiagnostic]) -> ValidationSummary:
    """Count diagnostics per type and per entity kind."""
    return ValidationSummary(
        total=len(diagnostics),
        by_type=dict(Counter(diagnostic.type for diagnostic in diagnostics)),
        by_entity_kind=dict(
            Counter(diagnostic.entity_kind for diagnostic in diagnostics)
        ),
    )
