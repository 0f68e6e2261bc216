"""Sources of the current instant.

Anything that relates an absolute point in time to "now" takes a ``Clock``
so callers can pin the current time (e.g. in tests) instead of reading the
system clock behind their back.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

from typing_extensions import override


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        pass

    def timestamp(self) -> float:
        """Return the current instant as Unix seconds."""
        return self.now().timestamp()


class SystemClock(Clock):
    """Clock backed by the system's wall clock, in UTC."""

    @override
    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    @override
    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Clock):
    """Clock that always reports the same instant."""

    def __init__(self, instant: datetime | int | float):
        if isinstance(instant, datetime):
            if instant.tzinfo is None:
                raise TypeError(
                    f"FixedClock requires a timezone-aware datetime.\n"
                    f"Got naive datetime: {instant!r}\n"
                    f"Hint: datetime(..., tzinfo=timezone.utc)"
                )
            self.instant: datetime = instant
        else:
            self.instant = datetime.fromtimestamp(instant, tz=timezone.utc)

    @override
    def now(self) -> datetime:
        return self.instant

    def advance(self, **delta: float) -> "FixedClock":
        """Return a new clock moved by ``timedelta(**delta)``.

        Example:
            >>> clock.advance(hours=2)
        """
        return FixedClock(self.instant + timedelta(**delta))

    @override
    def __repr__(self) -> str:
        return f"FixedClock({self.instant.isoformat()})"


system_clock: Clock = SystemClock()
