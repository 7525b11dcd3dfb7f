from __future__ import annotations

from ..core.enums import WeekWindowKind
from ..core.exceptions import ValidationError
from .windows.base import WeekWindow
from .windows.trailing_week import TrailingWeekWindow
from .windows.work_week import WorkWeekWindow


class WeekWindowFactory:
    """Factory that maps the configured WEEK_WINDOW to a strategy."""

    def for_kind(self, kind: WeekWindowKind | str) -> WeekWindow:
        try:
            kind = WeekWindowKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown week window: {kind!r}") from None

        if kind == WeekWindowKind.TRAILING_7_DAYS:
            return TrailingWeekWindow()
        return WorkWeekWindow()
