"""
Dataset Search

Case-insensitive substring filtering across the three collections, with
one numeric pattern: a query mentioning ``phase`` together with ``>``
returns only the tasks spanning more phases than the first number after
``phase``.
"""

import re
from collections.abc import Iterable, Sequence

from ...shared.base import ValueObject
from ..entities.records import Client, Task, Worker

_PHASE_THRESHOLD = re.compile(r"phase.*?([0-9]+)")


class SearchResult(ValueObject):
    """Filtered copies of the three collections."""

    clients: list[Client] = []
    workers: list[Worker] = []
    tasks: list[Task] = []

    @property
    def total(self) -> int:
        return len(self.clients) + len(self.workers) + len(self.tasks)


def _contains(needle: str, *haystacks: str | None) -> bool:
    return any(needle in (text or "").lower() for text in haystacks)


def _any_contains(needle: str, values: Iterable[str]) -> bool:
    return any(needle in value.lower() for value in values)


def _phase_threshold(normalized_query: str) -> int | None:
    if "phase" not in normalized_query or ">" not in normalized_query:
        return None
    match = _PHASE_THRESHOLD.search(normalized_query)
    return int(match.group(1)) if match else None


def search(
    query: str,
    clients: Sequence[Client],
    workers: Sequence[Worker],
    tasks: Sequence[Task],
) -> SearchResult:
    """
    Filter the dataset by a free-text query.

    A blank query is not special-cased here: it matches everything through
    the substring rules. Callers that want "no filter" should skip the call.
    """
    normalized = query.lower()

    threshold = _phase_threshold(normalized)
    if threshold is not None:
        return SearchResult(
            tasks=[
                task
                for task in tasks
                if task.phases is not None and task.phases > threshold
            ]
        )

    return SearchResult(
        clients=[
            client
            for client in clients
            if _contains(normalized, client.name, client.id)
        ],
        workers=[
            worker
            for worker in workers
            if _contains(normalized, worker.name, worker.id)
            or _any_contains(normalized, worker.skills)
        ],
        tasks=[
            task
            for task in tasks
            if _contains(normalized, task.name, task.id, task.client_id)
            or _any_contains(normalized, task.skills)
        ],
    )
