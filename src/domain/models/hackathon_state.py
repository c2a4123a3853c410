"""Hackathon lifecycle domain model.

This module defines the value types consumed and produced by the
lifecycle evaluator: the read-only record snapshot, the closed set of
display states, the normalized publication status, and the edit decision.

Lifecycle Rules:
- A hackathon is shown in exactly one of three states: draft, live, ended
- `status` is the system of record for "is this public"
- `end_date` is the system of record for "has this hackathon closed"
- `hackathon_status` is informational only and never affects state
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

# The one status label that makes a hackathon public
PUBLISHED_STATUS_LABEL = "published"

# Label assumed when the stored status is missing or empty
DEFAULT_STATUS_LABEL = "draft"


class HackathonDisplayState(Enum):
    """Externally visible lifecycle state of a hackathon.

    States:
        DRAFT: Not published, or not classifiable as live
        LIVE: Published and its end date has not passed
        ENDED: End date has passed (overrides every status label)
    """

    DRAFT = "draft"
    LIVE = "live"
    ENDED = "ended"


# All valid display states, in lifecycle order
VALID_HACKATHON_STATES: tuple[HackathonDisplayState, ...] = (
    HackathonDisplayState.DRAFT,
    HackathonDisplayState.LIVE,
    HackathonDisplayState.ENDED,
)

_VALID_STATE_VALUES: frozenset[str] = frozenset(s.value for s in VALID_HACKATHON_STATES)


def is_valid_display_state(value: object) -> bool:
    """Check whether value is a valid display state.

    Accepts HackathonDisplayState members and their exact string values.
    Matching on strings is case-sensitive: "LIVE" is not a valid state.

    Args:
        value: Any value.

    Returns:
        True if value names one of draft, live, ended.
    """
    if isinstance(value, HackathonDisplayState):
        return True
    return isinstance(value, str) and value in _VALID_STATE_VALUES


class PublicationStatus(Enum):
    """Normalized publication status read from the free-form `status` label.

    The stored vocabulary is not trusted beyond the single literal
    "published"; every other label, including garbage, is NOT_PUBLISHED.
    """

    PUBLISHED = "published"
    NOT_PUBLISHED = "not_published"

    @classmethod
    def from_label(cls, label: object) -> PublicationStatus:
        """Normalize a stored status label.

        Args:
            label: The raw `status` value from storage (may be None or garbage).

        Returns:
            PUBLISHED if the lowercased label is "published", else NOT_PUBLISHED.
        """
        normalized = label.lower() if isinstance(label, str) and label else DEFAULT_STATUS_LABEL
        if normalized == PUBLISHED_STATUS_LABEL:
            return cls.PUBLISHED
        return cls.NOT_PUBLISHED


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    """Return the first key's value present in record, or None."""
    for key in keys:
        if key in record:
            return record[key]
    return None


@dataclass(frozen=True, eq=True)
class HackathonSnapshot:
    """Point-in-time copy of the hackathon fields the evaluator reads.

    Values are kept exactly as stored. Dates are parsed on each
    evaluation, so a malformed date never prevents building a snapshot.

    Attributes:
        status: Free-form lifecycle label (only "published" is recognized).
        end_date: Stored end instant (string or datetime).
        start_date: Stored start instant; only needed for submission checks.
        hackathon_status: Legacy display label with no effect on state.
    """

    status: str | None
    end_date: str | datetime | None
    start_date: str | datetime | None = field(default=None)
    hackathon_status: str | None = field(default=None)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> HackathonSnapshot:
        """Build a snapshot from a raw storage record.

        Both snake_case and camelCase column names are accepted.
        Missing keys become None and unknown keys are ignored.

        Args:
            record: Mapping as returned by the persistence layer.

        Returns:
            A snapshot holding the relevant fields unchanged.
        """
        return cls(
            status=_first_present(record, "status"),
            end_date=_first_present(record, "end_date", "endDate"),
            start_date=_first_present(record, "start_date", "startDate"),
            hackathon_status=_first_present(record, "hackathon_status", "hackathonStatus"),
        )


@dataclass(frozen=True, eq=True)
class EditDecision:
    """Whether an organizer may edit a hackathon, and under which workflow.

    Attributes:
        can_edit: True if edits are allowed.
        requires_approval: True if edits must go through review.
            Always False: publishing no longer gates edits behind approval.
    """

    can_edit: bool
    requires_approval: bool = False


@dataclass(frozen=True, eq=True)
class LifecycleEvaluation:
    """Display state and every permission derived from it for one instant.

    Attributes:
        state: The derived display state.
        can_register: Registration is open.
        can_submit: Project submission is open.
        edit: Edit decision for organizers.
    """

    state: HackathonDisplayState
    can_register: bool
    can_submit: bool
    edit: EditDecision

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses and log context."""
        return {
            "state": self.state.value,
            "can_register": self.can_register,
            "can_submit": self.can_submit,
            "can_edit": self.edit.can_edit,
            "requires_approval": self.edit.requires_approval,
        }
