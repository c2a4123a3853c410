"""
Pytest configuration and shared fixtures for hackathon lifecycle tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the src/ layout
- Time-dependent tests use FakeTimeAuthority, never the wall clock
- Property tests use hypothesis and are marked `property`
"""

from datetime import datetime, timezone

import pytest

from tests.helpers.fake_time_authority import FakeTimeAuthority

# Fixed reference instant for scenario tests: 2026-01-15 10:00 UTC
REFERENCE_NOW = datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant."""
    return REFERENCE_NOW


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Deterministic time authority frozen at the reference instant."""
    return FakeTimeAuthority(frozen_at=REFERENCE_NOW)


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__
