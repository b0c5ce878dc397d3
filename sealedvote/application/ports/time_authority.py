"""Time Authority Protocol - interface for consistent timestamp provisioning.

Every deadline comparison in the core goes through this port instead of
calling datetime.now() directly, so tests can pin time exactly at a
proposal's deadline.

For production:
    Use SystemTimeAuthority from sealedvote/infrastructure/adapters/

For testing:
    Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority."""

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC recommended)."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time as a timezone-aware datetime."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Only differences between values are meaningful.
        """
        ...
