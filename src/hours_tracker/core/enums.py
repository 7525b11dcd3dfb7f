from __future__ import annotations

from enum import Enum


class WeekWindowKind(str, Enum):
    """Which date range counts as "this week" for weekly totals."""

    WORK_WEEK = "work_week"
    TRAILING_7_DAYS = "trailing_7_days"


class ViewStatus(str, Enum):
    LOADING = "LOADING"
    LOADED = "LOADED"
    ERROR = "ERROR"
