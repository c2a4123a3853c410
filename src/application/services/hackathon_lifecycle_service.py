"""Hackathon lifecycle service.

The process-boundary wrapper around the pure lifecycle evaluator. Request
handlers and UI components call this service to gate registration,
submission, and editing; it reads the reference instant from the injected
time authority exactly once per call and delegates to the domain.

Callers MUST NOT re-derive state with their own date comparisons, and
MUST NOT cache the results: every check recomputes from the clock.

Usage:
    from src.application.services import HackathonLifecycleService
    from src.infrastructure.adapters.time import SystemTimeAuthority

    lifecycle = HackathonLifecycleService(time_authority=SystemTimeAuthority())
    if not lifecycle.can_register(HackathonSnapshot.from_record(row)):
        raise RegistrationClosed()
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.services.base import LoggingMixin
from src.domain.models.hackathon_state import (
    EditDecision,
    HackathonDisplayState,
    HackathonSnapshot,
    LifecycleEvaluation,
)
from src.domain.primitives.instants import parse_instant
from src.domain.services import hackathon_lifecycle


class HackathonLifecycleService(LoggingMixin):
    """Lifecycle state and permissions evaluated at the current time.

    Attributes:
        _time: The time authority supplying "now".
    """

    def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
        """Initialize the lifecycle service.

        Args:
            time_authority: Clock source for every evaluation.
        """
        self._time = time_authority
        self._init_logger()

    def _now(self, operation: str, snapshot: HackathonSnapshot) -> datetime:
        now = self._time.now()
        if parse_instant(snapshot.end_date) is None:
            log = self._log_operation(operation)
            log.warning(
                "hackathon_end_date_unparseable",
                end_date=repr(snapshot.end_date),
                message="Treating hackathon as draft until end_date is readable",
            )
        return now

    def display_state(self, snapshot: HackathonSnapshot) -> HackathonDisplayState:
        """Return the display state at the current time."""
        now = self._now("display_state", snapshot)
        return hackathon_lifecycle.derive_state(snapshot, now)

    def can_register(self, snapshot: HackathonSnapshot) -> bool:
        """Return whether registration is open at the current time."""
        now = self._now("can_register", snapshot)
        return hackathon_lifecycle.can_register(snapshot, now)

    def can_submit(self, snapshot: HackathonSnapshot) -> bool:
        """Return whether project submission is open at the current time."""
        now = self._now("can_submit", snapshot)
        return hackathon_lifecycle.can_submit(snapshot, now)

    def can_edit(self, snapshot: HackathonSnapshot) -> EditDecision:
        """Return the organizer edit decision at the current time."""
        now = self._now("can_edit", snapshot)
        return hackathon_lifecycle.can_edit(snapshot, now)

    def evaluate(self, snapshot: HackathonSnapshot) -> LifecycleEvaluation:
        """Evaluate state and every permission against a single instant.

        Args:
            snapshot: The hackathon fields as stored.

        Returns:
            LifecycleEvaluation computed from one clock read.
        """
        now = self._now("evaluate", snapshot)
        evaluation = hackathon_lifecycle.evaluate(snapshot, now)

        log = self._log_operation("evaluate")
        log.debug(
            "hackathon_lifecycle_evaluated",
            evaluated_at=now,
            **evaluation.to_dict(),
        )
        return evaluation

    def evaluate_record(self, record: Mapping[str, Any]) -> LifecycleEvaluation:
        """Evaluate a raw storage record.

        Args:
            record: Row mapping with status, end_date, start_date and
                hackathon_status (snake_case or camelCase keys).

        Returns:
            LifecycleEvaluation for the record at the current time.
        """
        return self.evaluate(HackathonSnapshot.from_record(record))
