"""Pure validation, rule parsing and search services."""

from .column_mapper import apply_column_mapping, suggest_column_mapping
from .rule_parser import build_rule, describe_rule, parse_rule
from .search import SearchResult, search
from .validator import (
    summarize,
    validate_all,
    validate_clients,
    validate_tasks,
    validate_workers,
)

__all__ = [
    "SearchResult",
    "apply_column_mapping",
    "build_rule",
    "describe_rule",
    "parse_rule",
    "search",
    "suggest_column_mapping",
    "summarize",
    "validate_all",
    "validate_clients",
    "validate_tasks",
    "validate_workers",
]
