"""Mapping between calendar days and (week, weekday) grid coordinates.

Weekday 0 is Sunday, matching the rows of a contribution calendar.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Optional

from .config import COMMIT_HOUR

DAY = timedelta(days=1)
WEEK = timedelta(days=7)


def days_since_sunday(d) -> int:
    # Python weekday: Mon=0..Sun=6
    return (d.weekday() + 1) % 7


def origin_for_window(now: datetime, weeks: int, hour: int = COMMIT_HOUR) -> datetime:
    """First day of a window reaching `weeks` weeks back from the current week.

    The result is always a Sunday at `hour`:00 UTC.
    """
    if weeks < 0:
        raise ValueError('weeks must be >= 0, got {}'.format(weeks))
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    out = datetime(now.year, now.month, now.day, hour, 0, 0, tzinfo=timezone.utc)
    out -= days_since_sunday(out) * DAY
    return out - weeks * WEEK


def to_pattern_column(day: datetime, anchor: datetime) -> int:
    """Week column of `day` in the pattern's coordinate system, rounded half up.

    Rounds toward positive infinity on ties, so a day one week before the
    anchor is column -1.
    """
    weeks = (day - anchor).total_seconds() / DAY.total_seconds() / 7
    return math.floor(weeks + 0.5)


def resolve_cell(pattern, x: int, y: int) -> Optional[bool]:
    return pattern.cell(x, y)


def day_for_cell(window_start: datetime, week: int, weekday: int) -> datetime:
    return window_start + week * WEEK + weekday * DAY
