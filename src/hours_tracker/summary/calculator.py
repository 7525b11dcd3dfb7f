from __future__ import annotations

from datetime import date
from typing import Iterable

from ..entries.model import TimeEntry
from .pay import compute_pay
from .windows.base import WeekWindow


class SummaryCalculator:
    def __init__(self, window: WeekWindow):
        self._window = window

    def weekly_hours(self, entries: Iterable[TimeEntry], today: date) -> float:
        start, end = self._window.bounds(today)
        return _total(e for e in entries if start <= e.work_date <= end)

    def lifetime_hours(self, entries: Iterable[TimeEntry]) -> float:
        return _total(entries)

    def hours_on(self, entries: Iterable[TimeEntry], day: date) -> float:
        """Sum over every entry logged against exactly `day`."""
        return _total(e for e in entries if e.work_date == day)

    def weekly_pay(self, entries: Iterable[TimeEntry], today: date, rate: float) -> float:
        return compute_pay(self.weekly_hours(entries, today), rate)


def _total(entries: Iterable[TimeEntry]) -> float:
    # round away float noise like 0.1 + 0.2
    return round(float(sum(e.hours for e in entries)), 6)
