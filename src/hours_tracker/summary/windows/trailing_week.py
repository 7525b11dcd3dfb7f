from __future__ import annotations

from datetime import date, timedelta

from .base import WeekWindow


class TrailingWeekWindow(WeekWindow):
    """Today and the six days before it."""

    def bounds(self, today: date) -> tuple[date, date]:
        return today - timedelta(days=6), today
