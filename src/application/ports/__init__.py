"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- TimeAuthorityProtocol: Source of the reference instant for lifecycle checks
"""

from src.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = ["TimeAuthorityProtocol"]
