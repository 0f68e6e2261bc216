from datetime import timedelta

from humanspan.period import Accuracy
from humanspan.span import HumanTime


def humanize(delta: timedelta, precise: bool = False) -> str:
    """Describe a non-negative ``timedelta`` in English.

    Example:
        >>> humanize(timedelta(minutes=46))
        'in an hour'
        >>> humanize(timedelta(hours=1, seconds=5), precise=True)
        'in 1 hour and 5 seconds'
    """
    accuracy = Accuracy.PRECISE if precise else Accuracy.ROUGH
    return HumanTime.from_timedelta(delta).humanize(accuracy)
