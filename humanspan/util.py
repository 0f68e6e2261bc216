"""Utility constants for humanspan.

Time unit constants represent durations in seconds unless suffixed with
``_NS``, in which case they are nanoseconds. Months and years are fixed-length
approximations, not calendar-aware.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
DAYS_IN_MONTH = 30
MONTH = DAYS_IN_MONTH * DAY
YEAR = 365 * DAY

# Sub-second resolution
NANOSECOND_NS = 1
MICROSECOND_NS = 1_000
MILLISECOND_NS = 1_000_000
SECOND_NS = 1_000_000_000

# Spans of at most this many whole seconds read as "now" in rough mode
NOW_THRESHOLD = 10
