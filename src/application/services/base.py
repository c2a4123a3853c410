"""Base service logging mixin.

This module provides the LoggingMixin class for standardized structured
logging across application services.

Usage:
    from src.application.services.base import LoggingMixin

    class MyService(LoggingMixin):
        def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
            self._time = time_authority
            self._init_logger()

        def do_something(self) -> None:
            log = self._log_operation("do_something", hackathon_id="123")
            log.debug("operation_started")
"""

import structlog

from src.infrastructure.observability.correlation import get_correlation_id
from src.infrastructure.observability.logging import (
    DEFAULT_COMPONENT,
    get_logger_for_service,
)


class LoggingMixin:
    """Mixin providing structured logging for services.

    The logger is bound with:
    - service: The class name of the service
    - component: The component type (default: "lifecycle")

    Each operation gets:
    - operation: The name of the operation being performed
    - correlation_id: From context, set per request by the caller
    - Any additional context passed to _log_operation()

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = DEFAULT_COMPONENT) -> None:
        """Initialize the logger with service name binding.

        Args:
            component: The component type for log categorization.
        """
        self._log = get_logger_for_service(self.__class__.__name__, component)

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create operation-scoped logger with correlation ID.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind to the logger.

        Returns:
            BoundLogger with operation and correlation context.
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )
