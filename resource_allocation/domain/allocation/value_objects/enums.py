"""Domain enums for allocation data preparation."""

from enum import Enum


class EntityKind(str, Enum):
    """The three entity collections that make up a dataset."""

    CLIENT = "client"
    WORKER = "worker"
    TASK = "task"

    @property
    def collection(self) -> str:
        """Name of the collection holding records of this kind."""
        return f"{self.value}s"

    @classmethod
    def from_filename(cls, filename: str) -> "EntityKind | None":
        """Classify an uploaded file by the entity keyword in its name."""
        lowered = filename.lower()
        for kind in cls:
            if kind.value in lowered:
                return kind
        return None

    @classmethod
    def from_collection(cls, collection: str) -> "EntityKind":
        """Resolve ``clients``/``workers``/``tasks`` to its kind."""
        for kind in cls:
            if kind.collection == collection:
                return kind
        raise ValueError(f"Unknown collection: {collection}")


class DiagnosticType(str, Enum):
    """Kinds of data-quality issue the validator reports."""

    MISSING_COLUMN = "missing-column"
    DUPLICATE_ID = "duplicate-id"
    INVALID_REFERENCE = "invalid-reference"
    OUT_OF_RANGE = "out-of-range"
    MISSING_SKILL = "missing-skill"


class RuleType(str, Enum):
    """Business rule kinds understood by the allocation engine."""

    CO_RUN = "co-run"
    LOAD_LIMIT = "load-limit"
    PHASE_RESTRICTION = "phase-restriction"
    SKILL_REQUIREMENT = "skill-requirement"
