"""Validation diagnostics produced by the data validator."""

from typing import Any

from ...shared.base import ValueObject
from .enums import DiagnosticType, EntityKind


class ValidationDiagnostic(ValueObject):
    """
    One detected data-quality issue.

    ``id`` is the composite ``"<kind>-<entityId>"`` key and is shared by every
    diagnostic raised for the same record, so cell-level lookups need both
    ``id`` and ``field``. ``entity_kind``/``entity_id`` expose the same
    information without string parsing, and ``diagnostic_id`` is unique
    within a single validator call.
    """

    id: str
    type: DiagnosticType
    message: str
    field: str | None = None
    value: Any = None
    suggestion: str | None = None
    entity_kind: EntityKind
    entity_id: str
    diagnostic_id: str

    def concerns(self, entity_kind: EntityKind, entity_id: str, field: str) -> bool:
        """Check whether this diagnostic points at the given table cell."""
        return (
            self.entity_kind == entity_kind
            and self.entity_id == entity_id
            and self.field == field
        )


class ValidationSummary(ValueObject):
    """Diagnostic counts for the validation summary panel."""

    total: int = 0
    by_type: dict[DiagnosticType, int] = {}
    by_entity_kind: dict[EntityKind, int] = {}

    @property
    def is_clean(self) -> bool:
        return self.total == 0
