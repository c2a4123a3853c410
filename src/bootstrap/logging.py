"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from structlog import get_logger

from src.infrastructure.observability import configure_structlog


def configure_logging(environment: str | None = None) -> str:
    """Configure structlog from ENVIRONMENT and LOG_LEVEL.

    Args:
        environment: Overrides ENVIRONMENT when given.

    Returns:
        The environment that was applied.
    """
    applied = configure_structlog(environment=environment)

    log = get_logger().bind(component="startup_logging")
    log.info("structured_logging_configured", environment=applied)
    return applied


__all__ = ["configure_logging"]
