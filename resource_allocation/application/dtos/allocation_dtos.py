"""
Allocation Data Transfer Objects.

Request and response shapes for the HTTP surface. Records travel as plain
row dicts so that uploaded columns the schema does not know survive.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import ConfigDict, Field

from resource_allocation.application.services.workspace import UploadOutcome
from resource_allocation.domain.allocation.entities import Record
from resource_allocation.domain.allocation.services import SearchResult
from resource_allocation.domain.allocation.value_objects import (
    ColumnMapping,
    EntityKind,
    PrioritySettings,
    RuleType,
    ValidationDiagnostic,
    ValidationSummary,
)
from resource_allocation.domain.shared.base import WireModel

RowDict = dict[str, Any]


def to_rows(records: Sequence[Record]) -> list[RowDict]:
    return [record.to_row() for record in records]


class UploadedFileResponse(WireModel):
    """Outcome for one uploaded spreadsheet."""

    filename: str
    entity_kind: EntityKind
    record_count: int
    column_mappings: list[ColumnMapping] = []

    @classmethod
    def from_outcome(cls, outcome: UploadOutcome) -> "UploadedFileResponse":
        return cls(
            filename=outcome.filename,
            entity_kind=outcome.entity_kind,
            record_count=outcome.record_count,
            column_mappings=outcome.column_mappings,
        )


class UploadResponse(WireModel):
    files: list[UploadedFileResponse]
    validation_summary: ValidationSummary


class DatasetResponse(WireModel):
    clients: list[RowDict] = []
    workers: list[RowDict] = []
    tasks: list[RowDict] = []
    has_data: bool = False


class ReplaceRowsRequest(WireModel):
    """Edited table contents for one collection."""

    rows: list[RowDict] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "rows": [
                    {"id": "C1", "name": "Acme Corp", "priority": 8, "value": 50000}
                ]
            }
        }
    )


class ValidationReportResponse(WireModel):
    errors: list[ValidationDiagnostic]
    summary: ValidationSummary


class SearchResponse(WireModel):
    query: str
    clients: list[RowDict] = []
    workers: list[RowDict] = []
    tasks: list[RowDict] = []
    total: int = 0

    @classmethod
    def from_result(cls, query: str, result: SearchResult) -> "SearchResponse":
        return cls(
            query=query,
            clients=to_rows(result.clients),
            workers=to_rows(result.workers),
            tasks=to_rows(result.tasks),
            total=result.total,
        )


class CreateRuleRequest(WireModel):
    """Structured (form) rule definition."""

    type: RuleType
    config: dict[str, Any]
    description: str | None = Field(None, max_length=500)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "load-limit",
                "config": {"workerId": "W1", "maxSlots": 2},
            }
        }
    )


class ParseRuleRequest(WireModel):
    text: str = Field(..., min_length=1, max_length=1000)

    model_config = ConfigDict(
        json_schema_extra={"example": {"text": "Task T3 runs only in Phase 2"}}
    )


class PrioritySettingsResponse(WireModel):
    priorities: PrioritySettings
    total: int
    is_balanced: bool

    @classmethod
    def from_settings(cls, priorities: PrioritySettings) -> "PrioritySettingsResponse":
        return cls(
            priorities=priorities,
            total=priorities.total,
            is_balanced=priorities.is_balanced,
        )
