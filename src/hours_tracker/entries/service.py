from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import require_entry_id, require_iso_date, require_positive_number
from ..core.constants import HOURS_DECIMAL_PLACES, INVALID_ENTRY_MESSAGE, INVALID_ID_MESSAGE, MAX_ENTRY_HOURS
from .model import TimeEntry
from .repository import EntryRepository

logger = logging.getLogger(__name__)


class EntryService:
    """List/create/delete over the hours table. Stateless between calls."""

    def __init__(self, entries: EntryRepository):
        self._entries = entries

    def list_entries(self) -> Sequence[TimeEntry]:
        return self._entries.list_all()

    def create_entry(self, *, date_value: Any, hours_value: Any) -> int:
        work_date = require_iso_date(date_value, INVALID_ENTRY_MESSAGE)
        hours = require_positive_number(
            hours_value, INVALID_ENTRY_MESSAGE, max_value=MAX_ENTRY_HOURS, places=HOURS_DECIMAL_PLACES
        )

        entry_id = self._entries.create(work_date=work_date, hours=hours)
        logger.debug("created entry %s (%s, %sh)", entry_id, work_date, hours)
        return entry_id

    def delete_entry(self, *, entry_id_value: Any) -> None:
        entry_id = require_entry_id(entry_id_value, INVALID_ID_MESSAGE)

        # No existence check: deleting an unknown id is not an error
        if not self._entries.delete(entry_id=entry_id):
            logger.debug("delete of entry %s matched nothing", entry_id)
