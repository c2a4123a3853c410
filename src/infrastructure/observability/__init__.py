"""Observability infrastructure for structured logging and correlation.

This module provides cross-cutting observability concerns:
- Structured JSON logging with structlog, instants rendered as UTC ISO-8601
- Correlation ID management for request tracing

Usage:
    from src.infrastructure.observability import (
        configure_structlog,
        set_correlation_id,
    )

    # At startup (reads ENVIRONMENT and LOG_LEVEL)
    configure_structlog()

    # In request handling
    set_correlation_id(request_correlation_id)
"""

from src.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from src.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
    render_instants,
)

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "render_instants",
    "set_correlation_id",
]
