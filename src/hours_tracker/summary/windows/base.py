from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class WeekWindow(ABC):
    """Strategy for the date range weekly aggregates cover."""

    @abstractmethod
    def bounds(self, today: date) -> tuple[date, date]:
        """Inclusive (start, end) of the window that contains `today`."""

        raise NotImplementedError
