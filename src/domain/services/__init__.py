"""Domain services for the hackathon lifecycle.

Domain services contain business logic that doesn't naturally fit in
value objects. They are pure functions of their arguments.

Constraints:
- Domain services must NOT depend on infrastructure
- Domain services never read the clock; "now" is always passed in

Available services:
- derive_state, can_register, can_submit, can_edit, evaluate: lifecycle evaluator
- validate_hackathon_dates, ensure_valid_hackathon_dates: schedule validation
- validate_date_update: rescheduling an existing hackathon
"""

from src.domain.services.hackathon_lifecycle import (
    can_edit,
    can_register,
    can_submit,
    derive_state,
    evaluate,
)
from src.domain.services.schedule_validator import (
    ScheduleValidationResult,
    ensure_valid_hackathon_dates,
    format_duration,
    hackathon_duration,
    has_hackathon_ended,
    is_date_in_past,
    is_hackathon_active,
    validate_date,
    validate_date_update,
    validate_hackathon_dates,
)

__all__ = [
    "ScheduleValidationResult",
    "can_edit",
    "can_register",
    "can_submit",
    "derive_state",
    "ensure_valid_hackathon_dates",
    "evaluate",
    "format_duration",
    "hackathon_duration",
    "has_hackathon_ended",
    "is_date_in_past",
    "is_hackathon_active",
    "validate_date",
    "validate_date_update",
    "validate_hackathon_dates",
]
