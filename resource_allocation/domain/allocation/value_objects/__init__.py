"""Value objects for allocation data preparation."""

from .column_mapping import ColumnMapping
from .diagnostics import ValidationDiagnostic, ValidationSummary
from .enums import DiagnosticType, EntityKind, RuleType
from .priorities import PrioritySettings

__all__ = [
    "ColumnMapping",
    "DiagnosticType",
    "EntityKind",
    "PrioritySettings",
    "RuleType",
    "ValidationDiagnostic",
    "ValidationSummary",
]
