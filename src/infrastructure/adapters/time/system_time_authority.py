"""System clock time authority.

The production implementation of TimeAuthorityProtocol. This is the only
place in the codebase that reads the wall clock; everything downstream
receives the instant it returns.
"""

from datetime import datetime, timezone

from src.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Time authority backed by the host's wall clock (UTC)."""

    def now(self) -> datetime:
        """Return the current time as an aware UTC datetime."""
        return datetime.now(timezone.utc)

    def utcnow(self) -> datetime:
        """Return the current time as an aware UTC datetime."""
        return datetime.now(timezone.utc)
