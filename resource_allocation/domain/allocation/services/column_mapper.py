"""
Column Mapper

Suggests how uploaded spreadsheet headers map onto record fields, so that
"Client ID" or "client_id" columns land in ``id``/``clientId``.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

from ..value_objects.column_mapping import (
    EXACT_MATCH_CONFIDENCE,
    PARTIAL_MATCH_CONFIDENCE,
    ColumnMapping,
)

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")


def normalize_column(name: str) -> str:
    return _NON_ALPHANUMERIC.sub("", name.lower())


def suggest_column_mapping(
    original_columns: Sequence[str], target_schema: Sequence[str]
) -> list[ColumnMapping]:
    """
    Suggest a schema field for each uploaded column.

    Exact (normalized) matches are claimed first with confidence 1.0; the
    remaining columns take the first unclaimed field that contains, or is
    contained in, their normalized name, with confidence 0.8. Each field is
    claimed at most once. Columns without a match are left out.

    Args:
        original_columns: Headers as uploaded
        target_schema: Field names of the record type

    Returns:
        Mappings in the order of ``original_columns``
    """
    targets = {target: normalize_column(target) for target in target_schema}
    claimed: dict[str, ColumnMapping] = {}
    taken: set[str] = set()

    for original in original_columns:
        normalized = normalize_column(original)
        for target, target_normalized in targets.items():
            if target not in taken and normalized == target_normalized:
                claimed[original] = ColumnMapping(
                    original_name=original,
                    mapped_name=target,
                    confidence=EXACT_MATCH_CONFIDENCE,
                )
                taken.add(target)
                break

    for original in original_columns:
        normalized = normalize_column(original)
        if original in claimed or not normalized:
            continue
        for target, target_normalized in targets.items():
            if target in taken:
                continue
            if normalized in target_normalized or target_normalized in normalized:
                claimed[original] = ColumnMapping(
                    original_name=original,
                    mapped_name=target,
                    confidence=PARTIAL_MATCH_CONFIDENCE,
                )
                taken.add(target)
                break

    return [claimed[original] for original in original_columns if original in claimed]


def apply_column_mapping(
    row: Mapping[str, Any],
    mappings: Sequence[ColumnMapping],
    min_confidence: float,
) -> dict[str, Any]:
    """Rename the columns of one row; unmapped columns keep their name."""
    renames = {
        mapping.original_name: mapping.mapped_name
        for mapping in mappings
        if mapping.confidence >= min_confidence
    }
    return {renames.get(column, column): value for column, value in row.items()}
