"""Structured logging configuration for the lifecycle services.

Lifecycle log entries carry instants (the evaluation time, stored schedule
dates), so datetimes are rendered as UTC ISO-8601 strings before output
instead of falling back to repr().

Output mode follows the ENVIRONMENT variable: "production" renders one JSON
object per line, anything else renders for the console. LOG_LEVEL sets the
minimum level.

Log Entry Format (production):
    {
        "timestamp": "2026-01-15T10:00:00.000000Z",
        "level": "debug",
        "event": "hackathon_lifecycle_evaluated",
        "service": "HackathonLifecycleService",
        "component": "lifecycle",
        "operation": "evaluate",
        "correlation_id": "req-123",
        "evaluated_at": "2026-01-15T10:00:00Z",
        "state": "live",
        ...
    }

Usage:
    from src.infrastructure.observability import configure_structlog

    configure_structlog()  # from ENVIRONMENT / LOG_LEVEL
    configure_structlog(environment="production", log_level="DEBUG")
"""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import Any, cast

import structlog
from structlog.typing import Processor

from src.domain.primitives.instants import ensure_utc
from src.infrastructure.observability.correlation import correlation_id_processor

ENVIRONMENT_ENV = "ENVIRONMENT"
DEFAULT_ENVIRONMENT = "development"
JSON_ENVIRONMENT = "production"

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

DEFAULT_COMPONENT = "lifecycle"


def resolve_environment(environment: str | None = None) -> str:
    """Return the explicit environment, or ENVIRONMENT, or development."""
    if environment:
        return environment
    return os.getenv(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT).strip().lower() or DEFAULT_ENVIRONMENT


def resolve_log_level(log_level: str | None = None) -> int:
    """Return the numeric level for log_level, or LOG_LEVEL, or INFO.

    Unknown level names fall back to INFO.
    """
    name = (log_level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def render_instants(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Render datetime values as UTC ISO-8601 strings ending in "Z"."""
    for key, value in event_dict.items():
        if isinstance(value, datetime):
            utc = ensure_utc(value).astimezone(timezone.utc)
            event_dict[key] = utc.isoformat().replace("+00:00", "Z")
    return event_dict


def configure_structlog(
    environment: str | None = None,
    log_level: str | None = None,
) -> str:
    """Configure structlog for the lifecycle services.

    Should be called once at startup, before services are constructed.

    Args:
        environment: Output mode. Defaults to ENVIRONMENT, then development.
        log_level: Minimum level name. Defaults to LOG_LEVEL, then INFO.

    Returns:
        The environment that was applied.
    """
    resolved = resolve_environment(environment)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        cast(Processor, render_instants),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if resolved == JSON_ENVIRONMENT:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return resolved


def get_logger_for_service(
    service_name: str, component: str = DEFAULT_COMPONENT
) -> structlog.BoundLogger:
    """Get a logger with service and component already bound.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "lifecycle").

    Returns:
        A BoundLogger with service and component bound.
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
