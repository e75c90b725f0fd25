"""Data transfer objects for the HTTP surface."""

from .allocation_dtos import (
    CreateRuleRequest,
    DatasetResponse,
    ParseRuleRequest,
    PrioritySettingsResponse,
    ReplaceRowsRequest,
    SearchResponse,
    UploadedFileResponse,
    UploadResponse,
    ValidationReportResponse,
    to_rows,
)

__all__ = [
    "CreateRuleRequest",
    "DatasetResponse",
    "ParseRuleRequest",
    "PrioritySettingsResponse",
    "ReplaceRowsRequest",
    "SearchResponse",
    "UploadResponse",
    "UploadedFileResponse",
    "ValidationReportResponse",
    "to_rows",
]
