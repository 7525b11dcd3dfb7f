from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Optional, Protocol

from ..common.validators import require_iso_date, require_positive_number
from ..core.constants import (
    DEFAULT_HOURLY_RATE,
    HOURS_DECIMAL_PLACES,
    LOAD_ERROR_MESSAGE,
    MAX_ENTRY_HOURS,
    MAX_HOURLY_RATE,
)
from ..core.exceptions import ApiError, ValidationError
from ..entries.model import TimeEntry
from .state import EntriesState

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please enter a valid date and hours"
ADD_FAILED_MESSAGE = "Failed to add entry. Please try again."
DELETE_FAILED_MESSAGE = "Failed to delete entry. Please try again."
DELETE_CONFIRM_MESSAGE = "Delete this entry?"
INVALID_RATE_MESSAGE = "Please enter a valid hourly rate"


def _is_acceptable_rate(rate: float) -> bool:
    return math.isfinite(rate) and 0 <= rate <= MAX_HOURLY_RATE


class HoursApi(Protocol):
    def list_entries(self) -> list[TimeEntry]: ...

    def add_entry(self, *, work_date: date, hours: float) -> None: ...

    def delete_entry(self, entry_id: int) -> None: ...


class Notifier(Protocol):
    """Non-blocking user notification (level: success / warning / danger)."""

    def notify(self, message: str, level: str) -> None: ...


class Confirmation(Protocol):
    def confirm(self, message: str) -> bool: ...


class RateStore(Protocol):
    """Client-local storage for the hourly rate."""

    def load(self) -> Optional[float]: ...

    def save(self, rate: float) -> None: ...


class HoursController:
    """Wires user actions to the API and keeps EntriesState in sync.

    Writes never patch the local state: every successful add/delete is
    followed by a full refresh() so the view always shows what the server has.
    """

    def __init__(
        self,
        api: HoursApi,
        state: EntriesState,
        notifier: Notifier,
        rate_store: RateStore,
        *,
        default_rate: float = DEFAULT_HOURLY_RATE,
    ):
        self._api = api
        self._state = state
        self._notifier = notifier
        self._rate_store = rate_store
        self._default_rate = float(default_rate)

    @property
    def state(self) -> EntriesState:
        return self._state

    def refresh(self) -> EntriesState:
        self._state.begin_loading()
        try:
            entries = self._api.list_entries()
        except ApiError as e:
            logger.error("Error fetching entries: %s", e)
            self._state.fail(LOAD_ERROR_MESSAGE)
        else:
            self._state.replace(entries)
        return self._state

    def add_entry(self, date_text: Any, hours_text: Any) -> bool:
        try:
            work_date = require_iso_date(date_text, INVALID_INPUT_MESSAGE)
            hours = require_positive_number(
                hours_text, INVALID_INPUT_MESSAGE, max_value=MAX_ENTRY_HOURS, places=HOURS_DECIMAL_PLACES
            )
        except ValidationError as e:
            self._notifier.notify(str(e), "warning")
            return False

        try:
            self._api.add_entry(work_date=work_date, hours=hours)
        except ApiError as e:
            logger.error("Error adding entry: %s", e)
            self._notifier.notify(ADD_FAILED_MESSAGE, "danger")
            return False

        self.refresh()
        return True

    def delete_entry(self, entry_id: int, confirmation: Confirmation) -> bool:
        if not confirmation.confirm(DELETE_CONFIRM_MESSAGE):
            return False

        try:
            self._api.delete_entry(entry_id)
        except ApiError as e:
            logger.error("Error deleting entry %s: %s", entry_id, e)
            self._notifier.notify(DELETE_FAILED_MESSAGE, "danger")
            return False

        self.refresh()
        return True

    def current_rate(self) -> float:
        rate = self._rate_store.load()
        # Out-of-range stored rates fall back to the default
        if rate is None or not _is_acceptable_rate(rate):
            return self._default_rate
        return rate

    def change_rate(self, value: Any) -> float:
        try:
            rate = float(value)
        except (TypeError, ValueError):
            rate = -1.0
        if not _is_acceptable_rate(rate):
            self._notifier.notify(INVALID_RATE_MESSAGE, "warning")
            return self.current_rate()

        self._rate_store.save(rate)
        return rate

    def select_date(self, value: Any) -> Optional[date]:
        """Date a day card pre-fills into the add form; None when unusable."""
        try:
            return require_iso_date(value, INVALID_INPUT_MESSAGE)
        except ValidationError:
            return None
