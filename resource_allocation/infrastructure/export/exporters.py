"""JSON and CSV exporters for the prepared dataset."""

import csv
import io
import json
from collections.abc import Mapping, Sequence
from typing import Any

from resource_allocation.domain.allocation.entities.dataset import AllocationDataset


def export_json(dataset: AllocationDataset) -> str:
    """Pretty-print the whole dataset with 2-space indentation."""
    return json.dumps(dataset.to_document(), indent=2, ensure_ascii=False)


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return ",".join(_cell_text(item) for item in value)
    return str(value)


def export_csv(rows: Sequence[Mapping[str, Any]]) -> str | None:
    """
    Render one collection as CSV.

    The header is the key set of the first row; every data cell is quoted.
    List cells are comma-joined inside their quotes.

    Returns:
        CSV text, or None for an empty collection
    """
    if not rows:
        return None

    headers = list(rows[0].keys())
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="\n").writerow(headers)
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow([_cell_text(row.get(header)) for header in headers])
    return buffer.getvalue().rstrip("\n")
