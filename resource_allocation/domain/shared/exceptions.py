"""
Domain Exceptions

The validation and parsing core never raises on bad data; these exceptions
only surface at the workspace and ingestion boundary, where the API layer
translates them into HTTP responses.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    PARSE = "parse"
    NOT_FOUND = "not_found"
    INGESTION = "ingestion"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class RuleParseError(DomainError):
    """Raised when rule text matches none of the sentence templates."""

    def __init__(self, text: str) -> None:
        super().__init__(
            "Could not parse the rule. Please try a different format.",
            ErrorType.PARSE,
            {"text": text},
        )
        self.text = text


class RuleConfigurationError(DomainError):
    """Raised when a structured rule config does not fit its rule type."""

    def __init__(self, rule_type: str, message: str) -> None:
        super().__init__(
            f"Invalid configuration for '{rule_type}' rule: {message}",
            ErrorType.VALIDATION,
            {"rule_type": rule_type},
        )
        self.rule_type = rule_type


class RuleNotFoundError(DomainError):
    """Raised when a rule id does not exist in the workspace."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(
            f"Rule '{rule_id}' not found", ErrorType.NOT_FOUND, {"rule_id": rule_id}
        )
        self.rule_id = rule_id


class UnrecognizedDatasetError(DomainError):
    """Raised when an upload filename names no known entity collection."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            f"Cannot tell whether '{filename}' holds clients, workers or tasks; "
            "include 'client', 'worker' or 'task' in the file name",
            ErrorType.INGESTION,
            {"filename": filename},
        )
        self.filename = filename


class SpreadsheetFormatError(DomainError):
    """Raised when an uploaded file cannot be read as a spreadsheet."""

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(
            f"Error processing '{filename}': {message}",
            ErrorType.INGESTION,
            {"filename": filename},
        )
        self.filename = filename
