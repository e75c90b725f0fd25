"""
Spreadsheet reader for uploaded client, worker and task files.

Produces one dict per data row keyed by the header row. No type coercion
happens here; records coerce their own fields.
"""

import csv
import io
from collections.abc import Iterable, Sequence
from pathlib import PurePath
from typing import Any
from xml.etree.ElementTree import ParseError
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from resource_allocation.core.observability import get_logger
from resource_allocation.domain.shared.exceptions import SpreadsheetFormatError

logger = get_logger(__name__)

Row = dict[str, Any]


def _is_blank(row: Row) -> bool:
    return all(value is None or str(value).strip() == "" for value in row.values())


def _read_csv(filename: str, content: bytes) -> list[Row]:
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise SpreadsheetFormatError(filename, "file is not UTF-8 encoded text") from e

    try:
        reader = csv.DictReader(io.StringIO(text))
        rows = []
        for row in reader:
            # Values beyond the header end up under the None key
            rows.append(
                {
                    key.strip(): value
                    for key, value in row.items()
                    if key is not None and key.strip()
                }
            )
    except csv.Error as e:
        raise SpreadsheetFormatError(filename, f"malformed CSV: {e}") from e
    return rows


# Malformed workbook XML raises ParseError, or lxml's XMLSyntaxError when lxml
# is installed (a SyntaxError subclass); bad cell data raises ValueError.
_UNREADABLE_WORKBOOK = (
    InvalidFileException,
    BadZipFile,
    ParseError,
    SyntaxError,
    KeyError,
    IndexError,
    OSError,
    ValueError,
    TypeError,
)


def _read_xlsx(filename: str, content: bytes) -> list[Row]:
    try:
        workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    except _UNREADABLE_WORKBOOK as e:
        raise SpreadsheetFormatError(filename, "file is not a valid .xlsx workbook") from e

    try:
        sheet_rows: Iterable[Sequence[Any]] = workbook.worksheets[0].iter_rows(
            values_only=True
        )
        iterator = iter(sheet_rows)
        header = next(iterator, None)
        if header is None:
            return []
        columns = [str(cell).strip() if cell is not None else None for cell in header]
        return [
            {column: value for column, value in zip(columns, values) if column}
            for values in iterator
        ]
    except _UNREADABLE_WORKBOOK as e:
        raise SpreadsheetFormatError(filename, "worksheet data could not be read") from e
    finally:
        workbook.close()


def read_spreadsheet(
    filename: str, content: bytes, accepted_extensions: Sequence[str]
) -> list[Row]:
    """
    Read the first sheet of an uploaded file into row dicts.

    Args:
        filename: Original upload name; its extension selects the reader
        content: Raw file bytes
        accepted_extensions: Lower-case extensions including the dot

    Returns:
        Non-blank data rows in file order

    Raises:
        SpreadsheetFormatError: If the file type is not accepted or the
            content cannot be read
    """
    suffix = PurePath(filename).suffix.lower()
    if suffix not in accepted_extensions:
        raise SpreadsheetFormatError(
            filename,
            f"unsupported file type '{suffix or filename}', expected one of: "
            f"{', '.join(accepted_extensions)}",
        )

    if suffix == ".csv":
        rows = _read_csv(filename, content)
    elif suffix == ".xlsx":
        rows = _read_xlsx(filename, content)
    else:
        raise SpreadsheetFormatError(filename, f"no reader for '{suffix}' files")

    data_rows = [row for row in rows if not _is_blank(row)]
    logger.debug(
        "Spreadsheet read",
        filename=filename,
        rows=len(data_rows),
        skipped_blank=len(rows) - len(data_rows),
    )
    return data_rows
