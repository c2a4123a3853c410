"""
Infrastructure layer - External adapters for the hackathon lifecycle.

This layer contains:
- Clock adapter (the wall clock behind TimeAuthorityProtocol)
- Observability (structured logging, correlation IDs)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

from src.infrastructure.adapters import SystemTimeAuthority

__all__: list[str] = ["SystemTimeAuthority"]
