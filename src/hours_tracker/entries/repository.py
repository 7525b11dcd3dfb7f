from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import TimeEntry


class EntryRepository(Protocol):
    def list_all(self) -> Sequence[TimeEntry]:
        """All entries, newest date first, then newest created_at first."""

        raise NotImplementedError

    def create(self, *, work_date: date, hours: float) -> int:
        raise NotImplementedError

    def delete(self, *, entry_id: int) -> bool:
        """Returns False when nothing matched; callers treat that as success."""

        raise NotImplementedError
