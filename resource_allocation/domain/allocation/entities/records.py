"""
Client, Worker and Task records.

Rows arrive straight from uploaded spreadsheets, so every field is coerced
leniently: numeric strings become numbers, delimited strings become lists,
blank cells become ``None``. Nothing here rejects a row; judging the data is
the validator's job.
"""

import math
import re
from collections.abc import Mapping
from typing import Annotated, Any, ClassVar

from pydantic import BeforeValidator, ConfigDict
from typing_extensions import Self

from ...shared.base import WireModel
from ..value_objects.enums import EntityKind

_LIST_SEPARATORS = re.compile(r"[,;]")


def coerce_number(value: Any) -> int | float | None:
    """Best-effort numeric coercion; anything unparseable becomes None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value) if value.is_integer() else value
    return None


def coerce_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def coerce_identifier(value: Any) -> str:
    return coerce_text(value) or ""


def coerce_string_list(value: Any) -> list[str]:
    """Accept a list or a comma/semicolon separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        items: list[Any] = _LIST_SEPARATORS.split(value)
    elif isinstance(value, list | tuple | set):
        items = list(value)
    else:
        items = [value]
    return [text for text in (coerce_text(item) for item in items) if text]


Number = Annotated[int | float | None, BeforeValidator(coerce_number)]
Text = Annotated[str | None, BeforeValidator(coerce_text)]
Identifier = Annotated[str, BeforeValidator(coerce_identifier)]
StringList = Annotated[list[str], BeforeValidator(coerce_string_list)]


class Record(WireModel):
    """
    Base class for the three entity records.

    Unknown spreadsheet columns are kept as extra fields so exports carry
    every uploaded column.
    """

    model_config = ConfigDict(extra="allow")

    kind: ClassVar[EntityKind]

    id: Identifier = ""
    name: Text = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Self:
        """Build a record from one spreadsheet row."""
        return cls.model_validate({str(key): value for key, value in row.items()})

    @classmethod
    def schema_fields(cls) -> list[str]:
        """Wire names of the declared columns, in declaration order."""
        return [field.alias or name for name, field in cls.model_fields.items()]

    @property
    def diagnostic_key(self) -> str:
        """Composite ``<kind>-<id>`` key used to group diagnostics."""
        return f"{self.kind.value}-{self.id}"

    def to_row(self) -> dict[str, Any]:
        """Dump the columns this record was built with, under wire names."""
        return self.model_dump(by_alias=True, mode="json", exclude_unset=True)


class Client(Record):
    kind: ClassVar[EntityKind] = EntityKind.CLIENT

    priority: Number = None
    value: Number = None
    requirements: StringList = []


class Worker(Record):
    kind: ClassVar[EntityKind] = EntityKind.WORKER

    skills: StringList = []
    availability: Number = None
    max_load: Number = None


class Task(Record):
    kind: ClassVar[EntityKind] = EntityKind.TASK

    client_id: Text = None
    phases: Number = None
    skills: StringList = []
    priority: Number = None
    estimated_hours: Number = None


RECORD_TYPES: dict[EntityKind, type[Record]] = {
    EntityKind.CLIENT: Client,
    EntityKind.WORKER: Worker,
    EntityKind.TASK: Task,
}
