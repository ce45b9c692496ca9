"""
Clock capability.

The parser never reads system time directly. Century inference and age
computation take a Clock so results are reproducible in tests.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant."""
        pass


class SystemClock(Clock):
    """Clock backed by the local system time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def __repr__(self) -> str:
        return f"FixedClock({self.instant.isoformat()})"
