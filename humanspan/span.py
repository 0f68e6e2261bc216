from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from dateutil.parser import isoparse

from humanspan import formatter
from humanspan.clock import Clock, system_clock
from humanspan.period import Accuracy, Tense
from humanspan.util import (
    DAY,
    HOUR,
    MICROSECOND_NS,
    MILLISECOND_NS,
    MINUTE,
    MONTH,
    SECOND_NS,
    WEEK,
    YEAR,
)


@dataclass(frozen=True)
class HumanTime:
    """A signed span of time that knows how to describe itself in English.

    The magnitude is kept as a non-negative count of nanoseconds with the sign
    carried separately, so decomposition never has to deal with negative
    remainders. A zero span is always positive.

    Example:
        >>> str(HumanTime.from_minutes(46))
        'in an hour'
        >>> f"{HumanTime.from_seconds(-3725):#}"
        '1 hour, 2 minutes and 5 seconds ago'
    """

    nanos: int
    is_positive: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.nanos, int):
            raise TypeError(
                f"HumanTime magnitude must be an int count of nanoseconds, "
                f"got {type(self.nanos).__name__!r}: {self.nanos!r}"
            )
        if self.nanos < 0:
            raise ValueError(
                f"HumanTime magnitude must be non-negative, got {self.nanos}.\n"
                f"The sign is carried by is_positive.\n"
                f"Hint: use HumanTime.from_nanoseconds({self.nanos}) for a "
                f"signed count"
            )
        if self.nanos == 0 and not self.is_positive:
            object.__setattr__(self, "is_positive", True)

    # -- construction -------------------------------------------------------

    @classmethod
    def now(cls) -> "HumanTime":
        """The zero span: the current moment."""
        return cls(0)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> "HumanTime":
        return cls(abs(nanoseconds), nanoseconds >= 0)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> "HumanTime":
        return cls.from_nanoseconds(microseconds * MICROSECOND_NS)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> "HumanTime":
        return cls.from_nanoseconds(milliseconds * MILLISECOND_NS)

    @classmethod
    def from_seconds(cls, seconds: int) -> "HumanTime":
        """Span of ``seconds`` whole seconds; negative counts lie in the past."""
        return cls.from_nanoseconds(seconds * SECOND_NS)

    @classmethod
    def from_units(cls, count: int, unit_seconds: int) -> "HumanTime":
        """Span of ``count`` units, each ``unit_seconds`` long."""
        return cls.from_seconds(count * unit_seconds)

    @classmethod
    def from_minutes(cls, minutes: int) -> "HumanTime":
        return cls.from_units(minutes, MINUTE)

    @classmethod
    def from_hours(cls, hours: int) -> "HumanTime":
        return cls.from_units(hours, HOUR)

    @classmethod
    def from_days(cls, days: int) -> "HumanTime":
        return cls.from_units(days, DAY)

    @classmethod
    def from_weeks(cls, weeks: int) -> "HumanTime":
        return cls.from_units(weeks, WEEK)

    @classmethod
    def from_months(cls, months: int) -> "HumanTime":
        """Span of ``months`` fixed 30-day months."""
        return cls.from_units(months, MONTH)

    @classmethod
    def from_years(cls, years: int) -> "HumanTime":
        """Span of ``years`` fixed 365-day years."""
        return cls.from_units(years, YEAR)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "HumanTime":
        """Wrap a non-negative ``timedelta``; the result is always positive."""
        if delta < timedelta(0):
            raise ValueError(
                f"HumanTime.from_timedelta() requires a non-negative timedelta.\n"
                f"Got: {delta!r}\n"
                f"Hint: for signed spans use -HumanTime.from_timedelta(-delta)"
            )
        return cls(_timedelta_nanos(delta))

    @classmethod
    def from_instant(cls, instant: Any, clock: Clock | None = None) -> "HumanTime":
        """Span from the clock's current time to ``instant``.

        Instants in the future give positive spans, instants in the past give
        negative ones.

        Accepts:
        - int/float: Unix timestamp in seconds
        - datetime: Must be timezone-aware
        - date: Midnight UTC of that day
        - str: ISO-8601 timestamp with a UTC offset

        Raises:
            TypeError: If instant is an unsupported type or naive datetime
            ValueError: If an instant string is not ISO-8601
        """
        clock = clock or system_clock
        delta = _coerce_instant(instant) - clock.now()
        return cls.from_nanoseconds(_timedelta_nanos(delta))

    @classmethod
    def since_timestamp(
        cls, timestamp: int, clock: Clock | None = None
    ) -> "HumanTime":
        """Span from a Unix ``timestamp`` until now, in whole seconds.

        Past timestamps give negative spans ("3 days ago").
        """
        clock = clock or system_clock
        return cls.from_seconds(int(timestamp) - int(clock.timestamp()))

    # -- conversion ---------------------------------------------------------

    @property
    def seconds(self) -> int:
        """Whole seconds in the magnitude, ignoring sign."""
        return self.nanos // SECOND_NS

    def as_nanoseconds(self) -> int:
        """Signed nanoseconds."""
        return self.nanos if self.is_positive else -self.nanos

    def as_seconds(self) -> int:
        """Signed whole seconds; the fractional part is dropped."""
        return self.seconds if self.is_positive else -self.seconds

    def to_timedelta(self) -> timedelta:
        """Signed ``timedelta``; precision below a microsecond is dropped."""
        micros = self.nanos // MICROSECOND_NS
        return timedelta(microseconds=micros if self.is_positive else -micros)

    def to_unix_timestamp(self, clock: Clock | None = None) -> int:
        """Unix timestamp of the instant this span reaches from now."""
        clock = clock or system_clock
        return int((clock.now() + self.to_timedelta()).timestamp())

    def is_zero(self) -> bool:
        return self.nanos == 0

    # -- arithmetic ---------------------------------------------------------

    def __add__(self, other: object) -> "HumanTime":
        if not isinstance(other, HumanTime):
            return NotImplemented
        return HumanTime.from_nanoseconds(
            self.as_nanoseconds() + other.as_nanoseconds()
        )

    def __sub__(self, other: object) -> "HumanTime":
        if not isinstance(other, HumanTime):
            return NotImplemented
        return HumanTime.from_nanoseconds(
            self.as_nanoseconds() - other.as_nanoseconds()
        )

    def __neg__(self) -> "HumanTime":
        return HumanTime.from_nanoseconds(-self.as_nanoseconds())

    # -- text ---------------------------------------------------------------

    def tense(self, accuracy: Accuracy) -> Tense:
        """Tense this span takes when described at ``accuracy``."""
        return formatter.tense(self.seconds, self.is_positive, accuracy)

    def to_text(self, accuracy: Accuracy, tense: Tense) -> str:
        """English text at ``accuracy`` with the tense forced to ``tense``."""
        return formatter.to_text(self.nanos, accuracy, tense)

    to_text_en = to_text

    def humanize(self, accuracy: Accuracy = Accuracy.ROUGH) -> str:
        """English text at ``accuracy`` with the tense derived from the span."""
        return self.to_text(accuracy, self.tense(accuracy))

    def __str__(self) -> str:
        return self.humanize(Accuracy.ROUGH)

    def __format__(self, format_spec: str) -> str:
        """Format as text; the ``#`` flag selects precise accuracy.

        Fill, alignment and width apply to the resulting text:

            >>> f"[{HumanTime.from_seconds(90061):#>40}]"
        """
        if len(format_spec) >= 2 and format_spec[1] in "<>^=":
            align, rest = format_spec[:2], format_spec[2:]
        elif format_spec[:1] in ("<", ">", "^", "="):
            align, rest = format_spec[:1], format_spec[1:]
        else:
            align, rest = "", format_spec

        accuracy = Accuracy.ROUGH
        if rest.startswith("#"):
            accuracy = Accuracy.PRECISE
            rest = rest[1:]

        return format(self.humanize(accuracy), align + rest)


def _timedelta_nanos(delta: timedelta) -> int:
    """Exact signed nanoseconds in ``delta``."""
    return (
        (delta.days * DAY + delta.seconds) * SECOND_NS
        + delta.microseconds * MICROSECOND_NS
    )


def _coerce_instant(instant: Any) -> datetime:
    """Convert a supported point-in-time value to an aware datetime."""
    if isinstance(instant, bool):
        raise TypeError(f"Instant must not be a bool, got {instant!r}")
    if isinstance(instant, (int, float)):
        return datetime.fromtimestamp(instant, tz=timezone.utc)
    if isinstance(instant, str):
        try:
            parsed = isoparse(instant)
        except ValueError as e:
            raise ValueError(
                f"Instant string must be an ISO-8601 timestamp.\n"
                f"Got: {instant!r}\n"
                f"Example: '2025-01-06T09:30:00+00:00'"
            ) from e
        return _coerce_instant(parsed)
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            raise TypeError(
                f"Instant must be a timezone-aware datetime.\n"
                f"Got naive datetime: {instant!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'US/Pacific', etc.\n"
                f"  # Or use timezone.utc for UTC:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return instant
    if isinstance(instant, date):
        return datetime.combine(instant, time.min, tzinfo=timezone.utc)
    raise TypeError(
        f"Instant must be int, float, datetime, date, or str.\n"
        f"Got {type(instant).__name__!r}: {instant!r}\n"
        f"Examples:\n"
        f"  HumanTime.from_instant(1735689600)  # int (Unix seconds)\n"
        f"  HumanTime.from_instant(datetime(2025,1,1,tzinfo=timezone.utc))\n"
        f"  HumanTime.from_instant('2025-01-01T00:00:00Z')"
    )
