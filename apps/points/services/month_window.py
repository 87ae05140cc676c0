"""
Current-month query window for points aggregation.

The window opens at 00:01 on the first of the month and closes at 23:59 on
the last calendar day, both UTC. Both bounds are exclusive, so an event
stamped exactly at either bound is outside the month.
"""
import calendar
from dataclasses import dataclass
from datetime import datetime, timezone

WINDOW_START_TIME = (0, 1)
WINDOW_END_TIME = (23, 59)


@dataclass(frozen=True)
class MonthWindow:
    start: datetime
    end: datetime

    def contains(self, timestamp):
        """Strict containment: start < timestamp < end"""
        return self.start < _as_utc(timestamp) < self.end


def _as_utc(value):
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def current_month_window(now):
    """Window for the calendar month (in UTC) that contains ``now``"""
    now = _as_utc(now)
    last_day = calendar.monthrange(now.year, now.month)[1]
    start = datetime(now.year, now.month, 1, *WINDOW_START_TIME, tzinfo=timezone.utc)
    end = datetime(now.year, now.month, last_day, *WINDOW_END_TIME, tzinfo=timezone.utc)
    return MonthWindow(start=start, end=end)
