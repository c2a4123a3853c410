"""Hackathon schedule domain errors.

Raised by callers that need hard validation of a hackathon's start and
end dates (e.g. when an organizer saves a form). The lifecycle evaluator
never raises these: it fails closed to the draft state instead.
"""

from __future__ import annotations

from src.domain.exceptions import HackathonPlatformError


class InvalidHackathonScheduleError(HackathonPlatformError):
    """Raised when hackathon dates fail schedule validation.

    Attributes:
        errors: Every validation error found, in check order.
    """

    def __init__(self, errors: tuple[str, ...]) -> None:
        self.errors = errors
        super().__init__("Invalid hackathon schedule: " + "; ".join(errors))
