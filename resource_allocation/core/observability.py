"""
Observability Infrastructure

Structured logging, correlation tracking and Prometheus counters for the
allocation workspace and its HTTP surface.
"""

import contextvars
import logging
import sys
import uuid
from typing import Any

import structlog
from prometheus_client import Counter

from .config import settings

# Context variables for correlation tracking
correlation_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)

# Prometheus metrics
REQUEST_COUNT = Counter(
    "allocation_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

UPLOADS = Counter(
    "allocation_uploads_total",
    "Spreadsheet uploads by dataset kind",
    ["entity_kind"],
)

VALIDATION_RUNS = Counter(
    "allocation_validation_runs_total",
    "Full revalidations of the workspace",
)

DIAGNOSTICS_EMITTED = Counter(
    "allocation_diagnostics_total",
    "Diagnostics produced by validation runs",
    ["diagnostic_type"],
)

RULE_PARSE_ATTEMPTS = Counter(
    "allocation_rule_parse_attempts_total",
    "Natural-language rule parse attempts",
    ["outcome"],
)


class CorrelationIdProcessor:
    """Structlog processor to add correlation ID to all log entries."""

    def __call__(
        self, logger: Any, name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        correlation_id = correlation_id_var.get("")

        if correlation_id:
            event_dict["correlation_id"] = correlation_id

        return event_dict


def setup_structured_logging() -> None:
    """Configure structured logging with JSON output and correlation tracking."""

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        CorrelationIdProcessor(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=settings.ENVIRONMENT == "local")
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    # multipart parsing is chatty at DEBUG
    logging.getLogger("multipart").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set correlation ID for request tracking."""
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    correlation_id_var.set(correlation_id)
    return correlation_id


def initialize_observability() -> None:
    """Initialize all observability components."""
    setup_structured_logging()

    logger = get_logger("observability")
    logger.info(
        "Observability system initialized",
        log_format=settings.LOG_FORMAT,
        log_level=settings.LOG_LEVEL,
        metrics_enabled=settings.ENABLE_METRICS,
    )
