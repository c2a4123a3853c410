"""Hackathon lifecycle evaluator domain service.

Derives a hackathon's display state and its permission predicates from a
record snapshot and an explicit reference instant. Every function here is
pure: no clock reads, no logging, no mutation of the snapshot.

Lifecycle Rules:
- now > end_date => ENDED, checked before any status label
- now <= end_date and status "published" => LIVE
- everything else, including an unreadable end_date => DRAFT
- registration iff LIVE
- submission iff LIVE and now >= start_date
- edit allowed unless ENDED, never behind approval

The end boundary is exclusive on the ENDED side (now == end_date is still
LIVE) while the start boundary for submissions is inclusive.
"""

from __future__ import annotations

from datetime import datetime

from src.domain.models.hackathon_state import (
    EditDecision,
    HackathonDisplayState,
    HackathonSnapshot,
    LifecycleEvaluation,
    PublicationStatus,
)
from src.domain.primitives.instants import ensure_utc, parse_instant

_EDIT_DECISIONS: dict[HackathonDisplayState, EditDecision] = {
    HackathonDisplayState.DRAFT: EditDecision(can_edit=True, requires_approval=False),
    HackathonDisplayState.LIVE: EditDecision(can_edit=True, requires_approval=False),
    HackathonDisplayState.ENDED: EditDecision(can_edit=False, requires_approval=False),
}


def derive_state(snapshot: HackathonSnapshot, now: datetime) -> HackathonDisplayState:
    """Derive the display state of a hackathon at the given instant.

    Args:
        snapshot: The hackathon fields as stored.
        now: Reference instant. Naive values are taken as UTC.

    Returns:
        Exactly one of DRAFT, LIVE, ENDED. Never raises on malformed data.
    """
    end_date = parse_instant(snapshot.end_date)
    if end_date is None:
        # Unreadable end date can never be live
        return HackathonDisplayState.DRAFT

    if ensure_utc(now) > end_date:
        return HackathonDisplayState.ENDED

    publication = PublicationStatus.from_label(snapshot.status)
    if publication is PublicationStatus.PUBLISHED:
        return HackathonDisplayState.LIVE
    return HackathonDisplayState.DRAFT


def can_register(snapshot: HackathonSnapshot, now: datetime) -> bool:
    """Check whether registration is open: the hackathon is LIVE."""
    return derive_state(snapshot, now) is HackathonDisplayState.LIVE


def _submission_open(
    snapshot: HackathonSnapshot,
    state: HackathonDisplayState,
    now: datetime,
) -> bool:
    if state is not HackathonDisplayState.LIVE:
        return False

    start_date = parse_instant(snapshot.start_date)
    if start_date is None:
        return False

    return ensure_utc(now) >= start_date


def can_submit(snapshot: HackathonSnapshot, now: datetime) -> bool:
    """Check whether project submission is open.

    Submissions require the LIVE state and that the build window has
    opened. The start boundary is inclusive. The end boundary comes from
    derive_state, which flips to ENDED strictly after end_date.

    Args:
        snapshot: The hackathon fields, including start_date.
        now: Reference instant.

    Returns:
        True if a submission made at `now` is accepted. False when
        start_date is missing or unreadable.
    """
    return _submission_open(snapshot, derive_state(snapshot, now), now)


def can_edit(snapshot: HackathonSnapshot, now: datetime) -> EditDecision:
    """Decide whether an organizer may edit the hackathon.

    Draft and live hackathons are editable without approval; ended
    hackathons are read-only. requires_approval is always False.
    """
    return _EDIT_DECISIONS[derive_state(snapshot, now)]


def evaluate(snapshot: HackathonSnapshot, now: datetime) -> LifecycleEvaluation:
    """Derive the state once and every permission from it.

    Args:
        snapshot: The hackathon fields as stored.
        now: Reference instant.

    Returns:
        LifecycleEvaluation with state and all three permissions.
    """
    state = derive_state(snapshot, now)
    return LifecycleEvaluation(
        state=state,
        can_register=state is HackathonDisplayState.LIVE,
        can_submit=_submission_open(snapshot, state, now),
        edit=_EDIT_DECISIONS[state],
    )
