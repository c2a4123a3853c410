"""
Application layer - Use cases and orchestration for the hackathon lifecycle.

This layer contains:
- Application services (clock-supplying wrappers over the domain)
- Port definitions (abstract interfaces for infrastructure)

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure adapters
"""

from src.application.ports import TimeAuthorityProtocol

__all__: list[str] = ["TimeAuthorityProtocol"]
