"""Column mapping suggestions for uploaded spreadsheets."""

from pydantic import Field

from ...shared.base import ValueObject

EXACT_MATCH_CONFIDENCE = 1.0
PARTIAL_MATCH_CONFIDENCE = 0.8


class ColumnMapping(ValueObject):
    """Suggested rename of an uploaded column to a schema field."""

    original_name: str
    mapped_name: str
    confidence: float = Field(ge=0.0, le=1.0)
