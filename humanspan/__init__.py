import logging

from .clock import Clock, FixedClock, SystemClock
from .humanize import humanize
from .period import Accuracy, Tense, TimePeriod, Unit
from .span import HumanTime
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HumanTime",
    "Accuracy",
    "Tense",
    "TimePeriod",
    "Unit",
    "Clock",
    "SystemClock",
    "FixedClock",
    "humanize",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
