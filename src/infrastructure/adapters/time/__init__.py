"""Clock adapters."""

from src.infrastructure.adapters.time.system_time_authority import SystemTimeAuthority

__all__ = ["SystemTimeAuthority"]
