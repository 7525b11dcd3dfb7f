from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..core.enums import ViewStatus
from ..entries.model import TimeEntry


@dataclass
class EntriesState:
    """Client-side copy of the entry collection.

    Only ever replaced wholesale from a list fetch; mutations go to the server
    and are followed by a refetch.
    """

    entries: list[TimeEntry] = field(default_factory=list)
    status: ViewStatus = ViewStatus.LOADING
    message: Optional[str] = None

    def begin_loading(self) -> None:
        self.status = ViewStatus.LOADING
        self.message = None

    def replace(self, entries: Iterable[TimeEntry]) -> None:
        self.entries = list(entries)
        self.status = ViewStatus.LOADED
        self.message = None

    def fail(self, message: str) -> None:
        # Never show stale rows after a failed load
        self.entries = []
        self.status = ViewStatus.ERROR
        self.message = message

    @property
    def is_empty(self) -> bool:
        return not self.entries
