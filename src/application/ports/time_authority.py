"""Time Authority Protocol - interface for the lifecycle's only clock source.

This port defines the contract for obtaining the reference instant used
to evaluate hackathon lifecycle state. The domain evaluator takes "now"
as an explicit argument; services at the process boundary MUST obtain it
from an injected TimeAuthorityProtocol instead of calling datetime.now().

Benefits:
1. **Testability**: Tests inject a fake authority and freeze or advance time
2. **Consistency**: Every permission check in a request uses one clock
3. **Fuzzability**: Property tests drive the evaluator with arbitrary instants
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def process(self) -> None:
                now = self._time.now()  # NOT datetime.now()
                ...

    For production:
        Use SystemTimeAuthority from src/infrastructure/adapters/time/

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness.

        Note:
            Implementations must return timezone-aware datetimes.
        """
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current time in UTC (timezone-aware)."""
        ...
