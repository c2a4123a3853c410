"""Base exception classes for the hackathon lifecycle domain layer."""


class HackathonPlatformError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application.

    Note that the lifecycle evaluator itself never raises on data:
    malformed records degrade to the draft state instead.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
