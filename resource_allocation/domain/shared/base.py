"""Base classes for domain records and value objects."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Base model for everything that crosses the wire.

    Python attributes are snake_case; the exchanged JSON uses the camelCase
    names of the spreadsheet tool (``clientId``, ``maxSlots``...). Both
    spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self, **kwargs: Any) -> dict[str, Any]:
        """Dump using wire aliases and JSON-compatible values."""
        return self.model_dump(by_alias=True, mode="json", **kwargs)


class ValueObject(WireModel):
    """Base class for value objects (immutable, defined by their values)."""

    model_config = ConfigDict(frozen=True)
