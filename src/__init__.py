"""
Hackathon Lifecycle - state derivation for the hackathon platform

Computes a hackathon's externally visible display state (draft, live,
ended) and the registration, submission, and edit permissions that
follow from it, purely from stored timestamps and the publication status.

Lifecycle Truths:
- Time is the only source of truth for the terminal transition
- Permissions are derived, never stored
- Malformed input fails closed
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
