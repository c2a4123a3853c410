"""Infrastructure adapters implementing application ports."""

from src.infrastructure.adapters.time import SystemTimeAuthority

__all__: list[str] = ["SystemTimeAuthority"]
