"""Tests for HumanTime construction, arithmetic and formatting hooks."""

from datetime import date, datetime, timedelta, timezone

import pytest

from humanspan import FixedClock, HumanTime
from humanspan.util import DAY, HOUR, MONTH, SECOND_NS, WEEK, YEAR


def test_from_seconds_carries_sign_out_of_band():
    span = HumanTime.from_seconds(-90)
    assert span.nanos == 90 * SECOND_NS
    assert not span.is_positive
    assert span.as_seconds() == -90


def test_zero_is_positive():
    assert HumanTime.from_seconds(0).is_positive
    assert HumanTime(0, is_positive=False).is_positive
    assert HumanTime(0, is_positive=False) == HumanTime.now()
    assert (-HumanTime.now()).is_positive


def test_rejects_negative_magnitude():
    with pytest.raises(ValueError, match="must be non-negative"):
        HumanTime(-1)


def test_rejects_non_integer_magnitude():
    with pytest.raises(TypeError, match="int count of nanoseconds"):
        HumanTime(1.5)  # type: ignore[arg-type]


def test_unit_constructors_scale_into_seconds():
    assert HumanTime.from_minutes(2).as_seconds() == 120
    assert HumanTime.from_hours(-3).as_seconds() == -3 * HOUR
    assert HumanTime.from_days(4).as_seconds() == 4 * DAY
    assert HumanTime.from_weeks(5).as_seconds() == 5 * WEEK
    assert HumanTime.from_months(6).as_seconds() == 6 * MONTH
    assert HumanTime.from_years(-7).as_seconds() == -7 * YEAR
    assert HumanTime.from_units(3, 20) == HumanTime.from_minutes(1)
    assert HumanTime.from_milliseconds(1500).as_nanoseconds() == 1_500_000_000
    assert HumanTime.from_microseconds(-2).as_nanoseconds() == -2_000


def test_is_zero():
    assert HumanTime.now().is_zero()
    assert HumanTime.from_seconds(0).is_zero()
    assert HumanTime.from_days(0).is_zero()
    assert HumanTime.from_years(0).is_zero()
    assert not HumanTime.from_seconds(1).is_zero()
    assert not HumanTime.from_nanoseconds(-1).is_zero()


def test_large_spans_do_not_overflow():
    span = HumanTime.from_years(1_000_000)
    assert span.as_seconds() == 1_000_000 * YEAR
    assert str(span) == "in 1000000 years"


def test_add():
    result = HumanTime.from_seconds(30) + HumanTime.from_seconds(30)
    assert result.as_seconds() == 60
    assert result.is_positive


def test_add_crossing_zero():
    result = HumanTime.from_seconds(30) + HumanTime.from_seconds(-40)
    assert result.nanos == 10 * SECOND_NS
    assert not result.is_positive


def test_add_is_commutative():
    a = HumanTime.from_hours(5)
    b = HumanTime.from_minutes(-17)
    assert a + b == b + a


def test_sub():
    result = HumanTime.from_seconds(30) - HumanTime.from_seconds(30)
    assert result.is_zero()
    assert result.is_positive

    result = HumanTime.from_seconds(30) - HumanTime.from_seconds(-40)
    assert result.as_seconds() == 70
    assert result.is_positive


def test_arithmetic_does_not_mutate_operands():
    a = HumanTime.from_seconds(30)
    b = HumanTime.from_seconds(-40)
    _ = a + b
    _ = a - b
    assert a == HumanTime.from_seconds(30)
    assert b == HumanTime.from_seconds(-40)


def test_arithmetic_rejects_other_types():
    with pytest.raises(TypeError):
        HumanTime.from_seconds(1) + 1  # type: ignore[operator]


def test_from_timedelta_is_always_positive():
    span = HumanTime.from_timedelta(timedelta(hours=1, microseconds=1500))
    assert span.is_positive
    assert span.nanos == HOUR * SECOND_NS + 1_500_000
    assert HumanTime.from_timedelta(timedelta(0)) == HumanTime.now()


def test_from_timedelta_rejects_negative():
    with pytest.raises(ValueError, match="non-negative timedelta"):
        HumanTime.from_timedelta(timedelta(seconds=-1))


def test_to_timedelta():
    assert HumanTime.from_seconds(-90).to_timedelta() == timedelta(seconds=-90)
    assert HumanTime.from_nanoseconds(2_999).to_timedelta() == timedelta(
        microseconds=2
    )


def test_format_alternate_flag_selects_precise():
    span = HumanTime.from_seconds(61)
    assert f"{span}" == "in a minute"
    assert f"{span:#}" == "in 1 minute and 1 second"
    assert format(span, "") == str(span)


def test_format_applies_fill_and_width():
    span = HumanTime.from_seconds(15)
    assert f"{span:>16}" == "   in 15 seconds"
    assert f"{HumanTime.from_seconds(60):*^#15}" == "**in 1 minute**"


def test_format_hash_as_fill_character():
    """A leading '#' followed by an alignment is a fill, not the precise flag."""
    assert f"{HumanTime.from_seconds(60):#<15}" == "in a minute####"


def test_from_instant_with_fixed_clock():
    clock = FixedClock(datetime(2025, 1, 10, tzinfo=timezone.utc))

    past = HumanTime.from_instant(datetime(2025, 1, 7, tzinfo=timezone.utc), clock)
    assert not past.is_positive
    assert str(past) == "3 days ago"

    future = HumanTime.from_instant(
        datetime(2025, 1, 10, 2, tzinfo=timezone.utc), clock=clock
    )
    assert str(future) == "in 2 hours"

    assert HumanTime.from_instant(clock.now(), clock).is_zero()


def test_from_instant_accepts_timestamps_dates_and_strings():
    clock = FixedClock(datetime(2025, 1, 10, tzinfo=timezone.utc))
    noon = int(datetime(2025, 1, 10, 12, tzinfo=timezone.utc).timestamp())

    assert str(HumanTime.from_instant(noon, clock)) == "in 12 hours"
    assert str(HumanTime.from_instant(date(2025, 1, 6), clock)) == "4 days ago"
    assert str(HumanTime.from_instant("2025-01-10T00:00:46Z", clock)) == (
        "in a minute"
    )
    assert str(HumanTime.from_instant("2025-01-09T19:00:00-05:00", clock)) == "now"


def test_from_instant_rejects_naive_and_unsupported_values():
    clock = FixedClock(0)

    with pytest.raises(TypeError, match="timezone-aware"):
        HumanTime.from_instant(datetime(2025, 1, 1), clock)
    with pytest.raises(TypeError, match="timezone-aware"):
        HumanTime.from_instant("2025-01-01T00:00:00", clock)
    with pytest.raises(ValueError, match="ISO-8601"):
        HumanTime.from_instant("next tuesday", clock)
    with pytest.raises(TypeError, match="must be int, float, datetime"):
        HumanTime.from_instant([2025, 1, 1], clock)


def test_since_timestamp():
    clock = FixedClock(1_700_000_000)
    span = HumanTime.since_timestamp(1_700_000_000 - 3 * DAY, clock)
    assert span.as_seconds() == -3 * DAY
    assert str(span) == "3 days ago"


def test_to_unix_timestamp():
    clock = FixedClock(1_700_000_000)
    assert HumanTime.from_hours(1).to_unix_timestamp(clock) == 1_700_003_600
    assert HumanTime.from_hours(-1).to_unix_timestamp(clock) == 1_699_996_400
    assert HumanTime.now().to_unix_timestamp(clock) == 1_700_000_000
