"""Monthly contribution deadline calculation."""

from datetime import datetime

from contribution_hub.domain.constants import CONTRIBUTION_DEADLINE_DAY


def next_contribution_deadline(now: datetime) -> datetime:
    """Return the next contribution deadline after ``now``.

    The deadline is the 12th of the month at 23:59:59. From the 13th onward
    it rolls over to the 12th of the following month. The returned value
    keeps the timezone of ``now``.

    Args:
        now: Reference timestamp.

    Returns:
        datetime: Upcoming deadline.
    """
    year, month = now.year, now.month
    if now.day > CONTRIBUTION_DEADLINE_DAY:
        month += 1
        if month > 12:
            month = 1
            year += 1
    return now.replace(
        year=year,
        month=month,
        day=CONTRIBUTION_DEADLINE_DAY,
        hour=23,
        minute=59,
        second=59,
        microsecond=0,
    )


__all__ = ["next_contribution_deadline"]
