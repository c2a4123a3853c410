"""Application services - Use case orchestration.

This module contains application services that supply infrastructure
(the clock) to pure domain operations.

Available services:
- HackathonLifecycleService: Lifecycle state and permissions at the current time
"""

from src.application.services.hackathon_lifecycle_service import (
    HackathonLifecycleService,
)

__all__ = ["HackathonLifecycleService"]
