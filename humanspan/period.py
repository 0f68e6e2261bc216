"""Value types used while turning a span into words.

A ``TimePeriod`` is one unit/count pair produced by decomposing a span. It only
lives for the duration of a single formatting call.
"""

from dataclasses import dataclass
from enum import Enum

from humanspan.util import (
    DAY,
    HOUR,
    MICROSECOND_NS,
    MILLISECOND_NS,
    MINUTE,
    MONTH,
    NANOSECOND_NS,
    SECOND_NS,
    WEEK,
    YEAR,
)


class Accuracy(Enum):
    """How faithfully a span is put into words."""

    ROUGH = "rough"
    """Single approximate unit, easy to grasp but not exact."""
    PRECISE = "precise"
    """Every non-zero unit, exact but wordier."""

    def is_rough(self) -> bool:
        return self is Accuracy.ROUGH

    def is_precise(self) -> bool:
        return self is Accuracy.PRECISE


class Tense(Enum):
    """Position of the span relative to the moment it is described."""

    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"


class Unit(Enum):
    NOW = "now"
    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"
    ETERNITY = "eternity"


# Length of one unit in nanoseconds. NOW and ETERNITY carry no length.
UNIT_NANOS: dict[Unit, int] = {
    Unit.NANOSECONDS: NANOSECOND_NS,
    Unit.MICROSECONDS: MICROSECOND_NS,
    Unit.MILLISECONDS: MILLISECOND_NS,
    Unit.SECONDS: SECOND_NS,
    Unit.MINUTES: MINUTE * SECOND_NS,
    Unit.HOURS: HOUR * SECOND_NS,
    Unit.DAYS: DAY * SECOND_NS,
    Unit.WEEKS: WEEK * SECOND_NS,
    Unit.MONTHS: MONTH * SECOND_NS,
    Unit.YEARS: YEAR * SECOND_NS,
}

_SYMBOLS = {
    Unit.NANOSECONDS: "ns",
    Unit.MICROSECONDS: "µs",
    Unit.MILLISECONDS: "ms",
}

# (singular, indefinite form) for units with a spelled-out name
_NAMES = {
    Unit.SECONDS: ("second", None),
    Unit.MINUTES: ("minute", "a minute"),
    Unit.HOURS: ("hour", "an hour"),
    Unit.DAYS: ("day", "a day"),
    Unit.WEEKS: ("week", "a week"),
    Unit.MONTHS: ("month", "a month"),
    Unit.YEARS: ("year", "a year"),
}


@dataclass(frozen=True)
class TimePeriod:
    unit: Unit
    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(
                f"TimePeriod count must be non-negative, got {self.count} "
                f"for {self.unit.value}"
            )

    @property
    def nanos(self) -> int:
        """Length of this period in nanoseconds (0 for now/eternity)."""
        return self.count * UNIT_NANOS.get(self.unit, 0)

    def to_text(self, accuracy: Accuracy) -> str:
        """Render this period alone, e.g. ``"an hour"`` or ``"3 days"``."""
        if self.unit is Unit.NOW:
            return "now"
        if self.unit is Unit.ETERNITY:
            return "eternity"
        if self.unit in _SYMBOLS:
            return f"{self.count} {_SYMBOLS[self.unit]}"

        singular, indefinite = _NAMES[self.unit]
        if self.count == 1:
            if accuracy.is_rough() and indefinite is not None:
                return indefinite
            return f"1 {singular}"
        return f"{self.count} {singular}s"

    def __str__(self) -> str:
        return self.to_text(Accuracy.PRECISE)
