"""Turn a sign-and-magnitude span into an English phrase.

Two strategies are available:

- Rough: a single unit chosen by thresholds that sit near the rounding
  midpoint between adjacent units ("in an hour", "3 days ago").
- Precise: every non-zero unit, largest first, with no loss of information
  ("1 year, 1 day and 1 second").
"""

import logging
from collections.abc import Sequence

from humanspan.period import UNIT_NANOS, Accuracy, Tense, TimePeriod, Unit
from humanspan.util import (
    DAY,
    HOUR,
    MINUTE,
    MONTH,
    NOW_THRESHOLD,
    SECOND_NS,
    WEEK,
    YEAR,
)

logger = logging.getLogger(__name__)

# Largest unit first; precise decomposition peels them in this order
_PRECISE_UNITS = (
    Unit.YEARS,
    Unit.MONTHS,
    Unit.WEEKS,
    Unit.DAYS,
    Unit.HOURS,
    Unit.MINUTES,
    Unit.SECONDS,
    Unit.MILLISECONDS,
    Unit.MICROSECONDS,
    Unit.NANOSECONDS,
)

# (exclusive lower bound in seconds, unit, unit length or None for a fixed count of 1)
_ROUGH_THRESHOLDS: tuple[tuple[int, Unit, int | None], ...] = (
    (547 * DAY, Unit.YEARS, YEAR),
    (345 * DAY, Unit.YEARS, None),
    (45 * DAY, Unit.MONTHS, MONTH),
    (29 * DAY, Unit.MONTHS, None),
    (10 * DAY + 12 * HOUR, Unit.WEEKS, WEEK),
    (6 * DAY + 12 * HOUR, Unit.WEEKS, None),
    (36 * HOUR, Unit.DAYS, DAY),
    (22 * HOUR, Unit.DAYS, None),
    (90 * MINUTE, Unit.HOURS, HOUR),
    (45 * MINUTE, Unit.HOURS, None),
    (90, Unit.MINUTES, MINUTE),
    (45, Unit.MINUTES, None),
)


def tense(seconds: int, is_positive: bool, accuracy: Accuracy) -> Tense:
    """Pick the tense for a span of ``seconds`` whole seconds.

    Short spans read as the present in rough mode. Otherwise the sign decides,
    so a zero span in precise mode is in the future ("in 0 seconds").
    """
    if accuracy.is_rough() and 0 <= seconds <= NOW_THRESHOLD:
        return Tense.PRESENT
    if not is_positive:
        return Tense.PAST
    return Tense.FUTURE


def rough_periods(seconds: int) -> list[TimePeriod]:
    """Approximate ``seconds`` with exactly one period."""
    for bound, unit, length in _ROUGH_THRESHOLDS:
        if seconds > bound:
            count = 1 if length is None else max(seconds // length, 2)
            return [TimePeriod(unit, count)]

    if seconds > NOW_THRESHOLD:
        return [TimePeriod(Unit.SECONDS, seconds)]
    if seconds >= 0:
        return [TimePeriod(Unit.NOW)]
    return [TimePeriod(Unit.ETERNITY)]


def precise_periods(nanos: int) -> list[TimePeriod]:
    """Break ``nanos`` into every non-zero unit, largest first.

    Each step carries the exact remainder forward, so the periods always sum
    back to ``nanos``.
    """
    periods: list[TimePeriod] = []
    remainder = nanos
    for unit in _PRECISE_UNITS:
        count, remainder = divmod(remainder, UNIT_NANOS[unit])
        if count:
            periods.append(TimePeriod(unit, count))

    assert remainder == 0, f"{remainder}ns left over decomposing {nanos}ns"
    assert sum(p.nanos for p in periods) == nanos, (
        f"periods {periods} do not add up to {nanos}ns"
    )

    if not periods:
        periods.append(TimePeriod(Unit.SECONDS, 0))
    return periods


def decompose(nanos: int, accuracy: Accuracy) -> list[TimePeriod]:
    """Decompose a non-negative magnitude according to ``accuracy``."""
    if accuracy.is_rough():
        periods = rough_periods(nanos // SECOND_NS)
    else:
        periods = precise_periods(nanos)
    logger.debug("Decomposed %dns (%s) into %s", nanos, accuracy.value, periods)
    return periods


def join(periods: Sequence[TimePeriod], accuracy: Accuracy) -> str:
    """Join rendered periods as ``"a, b and c"``."""
    if not periods:
        raise ValueError("join() requires at least one period")

    texts = [period.to_text(accuracy) for period in periods]
    if len(texts) == 1:
        return texts[0]
    return f"{', '.join(texts[:-1])} and {texts[-1]}"


def frame(text: str, tense: Tense) -> str:
    """Wrap ``text`` in the phrasing for ``tense``."""
    if tense is Tense.PAST:
        return f"{text} ago"
    if tense is Tense.FUTURE:
        return f"in {text}"
    return text


def to_text(nanos: int, accuracy: Accuracy, tense: Tense) -> str:
    """Render a magnitude at ``accuracy`` framed in ``tense``."""
    return frame(join(decompose(nanos, accuracy), accuracy), tense)
