"""Clock protocol.

Every "now" used for sliding expiration and eviction comes through this port
so tests can move time without sleeping.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
