"""
Allocation Workspace

Owns the in-memory dataset (clients, workers, tasks, rules, priorities) and
keeps the derived validation diagnostics current. Every change to an entity
collection replaces it wholesale and revalidates from scratch; nothing is
updated incrementally.
"""

import threading
import time
from collections.abc import Mapping, Sequence
from typing import Any

from resource_allocation.core.config import settings
from resource_allocation.core.observability import (
    DIAGNOSTICS_EMITTED,
    RULE_PARSE_ATTEMPTS,
    UPLOADS,
    VALIDATION_RUNS,
    get_logger,
)
from resource_allocation.domain.allocation.entities import (
    RECORD_TYPES,
    AllocationDataset,
    BusinessRule,
    Client,
    ParsedRule,
    Record,
    Task,
    Worker,
)
from resource_allocation.domain.allocation.services import (
    SearchResult,
    apply_column_mapping,
    parse_rule,
    search,
    suggest_column_mapping,
    summarize,
    validate_all,
)
from resource_allocation.domain.allocation.value_objects import (
    ColumnMapping,
    EntityKind,
    PrioritySettings,
    ValidationDiagnostic,
    ValidationSummary,
)
from resource_allocation.domain.shared.exceptions import (
    RuleNotFoundError,
    RuleParseError,
    UnrecognizedDatasetError,
)

logger = get_logger(__name__)

Row = Mapping[str, Any]


class UploadOutcome:
    """What happened to one uploaded file."""

    def __init__(
        self,
        filename: str,
        entity_kind: EntityKind,
        record_count: int,
        column_mappings: list[ColumnMapping],
    ):
        self.filename = filename
        self.entity_kind = entity_kind
        self.record_count = record_count
        self.column_mappings = column_mappings


class AllocationWorkspace:
    """
    State holder for one data-preparation session.

    The pure services in ``domain.allocation.services`` are always called
    with the workspace's current collections; the workspace never caches
    search results and recomputes diagnostics on every collection change.
    """

    def __init__(
        self,
        column_mapping_min_confidence: float | None = None,
        default_priority_weight: int | None = None,
    ):
        self._lock = threading.RLock()
        self._min_confidence = (
            settings.COLUMN_MAPPING_MIN_CONFIDENCE
            if column_mapping_min_confidence is None
            else column_mapping_min_confidence
        )
        self._default_weight = (
            settings.DEFAULT_PRIORITY_WEIGHT
            if default_priority_weight is None
            else default_priority_weight
        )
        self.reset()

    # Collections

    @property
    def clients(self) -> list[Client]:
        return list(self._clients)

    @property
    def workers(self) -> list[Worker]:
        return list(self._workers)

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def rules(self) -> list[BusinessRule]:
        return list(self._rules)

    @property
    def priorities(self) -> PrioritySettings:
        return self._priorities

    @property
    def validation_errors(self) -> list[ValidationDiagnostic]:
        return list(self._validation_errors)

    @property
    def has_data(self) -> bool:
        return bool(self._clients or self._workers or self._tasks)

    def reset(self) -> None:
        """Drop all data, rules and priority changes."""
        with self._lock:
            self._clients: list[Client] = []
            self._workers: list[Worker] = []
            self._tasks: list[Task] = []
            self._rules: list[BusinessRule] = []
            self._priorities = PrioritySettings.evenly_split(self._default_weight)
            self._validation_errors: list[ValidationDiagnostic] = []

    def load_upload(self, rows: Sequence[Row], filename: str) -> UploadOutcome:
        """
        Load parsed spreadsheet rows, classified by filename.

        Raises:
            UnrecognizedDatasetError: If the filename mentions no entity kind
        """
        kind = EntityKind.from_filename(filename)
        if kind is None:
            logger.warning("Upload not classified", filename=filename)
            raise UnrecognizedDatasetError(filename)

        record_type = RECORD_TYPES[kind]
        columns = list(dict.fromkeys(column for row in rows for column in row))
        mappings = suggest_column_mapping(columns, record_type.schema_fields())
        mapped_rows = [
            apply_column_mapping(row, mappings, self._min_confidence) for row in rows
        ]

        self.replace_collection(kind, mapped_rows)
        UPLOADS.labels(entity_kind=kind.value).inc()
        logger.info(
            "Dataset uploaded",
            filename=filename,
            entity_kind=kind.value,
            records=len(mapped_rows),
            renamed_columns={
                m.original_name: m.mapped_name
                for m in mappings
                if m.original_name != m.mapped_name
                and m.confidence >= self._min_confidence
            },
        )
        return UploadOutcome(filename, kind, len(mapped_rows), mappings)

    def replace_collection(self, kind: EntityKind, rows: Sequence[Row]) -> None:
        """Replace one entity collection wholesale and revalidate."""
        record_type: type[Record] = RECORD_TYPES[kind]
        records = [record_type.from_row(row) for row in rows]
        with self._lock:
            if kind is EntityKind.CLIENT:
                self._clients = records
            elif kind is EntityKind.WORKER:
                self._workers = records
            else:
                self._tasks = records
            self._revalidate()

    def replace_clients(self, rows: Sequence[Row]) -> None:
        self.replace_collection(EntityKind.CLIENT, rows)

    def replace_workers(self, rows: Sequence[Row]) -> None:
        self.replace_collection(EntityKind.WORKER, rows)

    def replace_tasks(self, rows: Sequence[Row]) -> None:
        self.replace_collection(EntityKind.TASK, rows)

    def _revalidate(self) -> None:
        diagnostics = validate_all(self._clients, self._workers, self._tasks)
        self._validation_errors = diagnostics

        VALIDATION_RUNS.inc()
        for diagnostic in diagnostics:
            DIAGNOSTICS_EMITTED.labels(diagnostic_type=diagnostic.type.value).inc()
        logger.info(
            "Dataset revalidated",
            clients=len(self._clients),
            workers=len(self._workers),
            tasks=len(self._tasks),
            diagnostics=len(diagnostics),
        )

    def validation_summary(self) -> ValidationSummary:
        return summarize(self._validation_errors)

    # Search

    def search(self, query: str) -> SearchResult:
        """Filter the dataset; a blank query returns everything."""
        with self._lock:
            if not query.strip():
                return SearchResult(
                    clients=list(self._clients),
                    workers=list(self._workers),
                    tasks=list(self._tasks),
                )
            return search(query, self._clients, self._workers, self._tasks)

    # Rules

    def _next_rule_id(self) -> str:
        taken = {rule.id for rule in self._rules}
        stamp = int(time.time() * 1000)
        while f"rule-{stamp}" in taken:
            stamp += 1
        return f"rule-{stamp}"

    def add_rule(self, parsed: ParsedRule) -> BusinessRule:
        """Give a parsed or form-built rule an identity and store it enabled."""
        with self._lock:
            rule = parsed.to_business_rule(self._next_rule_id())
            self._rules = [*self._rules, rule]
        logger.info(
            "Business rule added",
            rule_id=rule.id,
            rule_type=rule.type.value,
            description=rule.description,
        )
        return rule

    def add_rule_from_text(self, text: str) -> BusinessRule:
        """
        Parse a natural-language rule and store it.

        Raises:
            RuleParseError: If no sentence template matches
        """
        parsed = parse_rule(text)
        if parsed is None:
            RULE_PARSE_ATTEMPTS.labels(outcome="failed").inc()
            logger.info("Rule text not understood", text=text)
            raise RuleParseError(text)
        RULE_PARSE_ATTEMPTS.labels(outcome="parsed").inc()
        return self.add_rule(parsed)

    def _rule_index(self, rule_id: str) -> int:
        for index, rule in enumerate(self._rules):
            if rule.id == rule_id:
                return index
        raise RuleNotFoundError(rule_id)

    def toggle_rule(self, rule_id: str) -> BusinessRule:
        with self._lock:
            index = self._rule_index(rule_id)
            toggled = self._rules[index].toggled()
            self._rules = [
                toggled if position == index else rule
                for position, rule in enumerate(self._rules)
            ]
        logger.info("Business rule toggled", rule_id=rule_id, enabled=toggled.enabled)
        return toggled

    def remove_rule(self, rule_id: str) -> None:
        with self._lock:
            self._rule_index(rule_id)
            self._rules = [rule for rule in self._rules if rule.id != rule_id]
        logger.info("Business rule removed", rule_id=rule_id)

    # Priorities

    def update_priorities(self, priorities: PrioritySettings) -> PrioritySettings:
        with self._lock:
            self._priorities = priorities
        if not priorities.is_balanced:
            logger.info("Priority weights do not sum to 100", total=priorities.total)
        return priorities

    # Export

    def export_data(self) -> AllocationDataset:
        with self._lock:
            return AllocationDataset(
                clients=list(self._clients),
                workers=list(self._workers),
                tasks=list(self._tasks),
                rules=list(self._rules),
                priorities=self._priorities,
                validation_errors=list(self._validation_errors),
            )
