from __future__ import annotations

from datetime import date, timedelta

from ...common.datetime_utils import monday_of
from .base import WeekWindow


class WorkWeekWindow(WeekWindow):
    """Monday through Friday of the current calendar week.

    On a weekend the window is the Mon-Fri just worked, so Saturday and Sunday
    entries never count.
    """

    def bounds(self, today: date) -> tuple[date, date]:
        monday = monday_of(today)
        return monday, monday + timedelta(days=4)
