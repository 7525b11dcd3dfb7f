from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from hours_tracker.client.controller import HoursController
from hours_tracker.client.state import EntriesState
from hours_tracker.core.enums import ViewStatus
from hours_tracker.core.exceptions import ApiError
from hours_tracker.entries.model import TimeEntry


class FakeApi:
    def __init__(self, entries=None):
        self.entries: list[TimeEntry] = list(entries or [])
        self.fail_list = False
        self.fail_add = False
        self.fail_delete = False
        self.added: list[tuple[date, float]] = []
        self.deleted: list[int] = []
        self.list_calls = 0

    def list_entries(self):
        self.list_calls += 1
        if self.fail_list:
            raise ApiError("network down")
        return list(self.entries)

    def add_entry(self, *, work_date, hours):
        if self.fail_add:
            raise ApiError("500", status_code=500)
        self.added.append((work_date, hours))
        self.entries.insert(0, TimeEntry(entry_id=len(self.added) + 100, work_date=work_date, hours=hours))

    def delete_entry(self, entry_id):
        if self.fail_delete:
            raise ApiError("500", status_code=500)
        self.deleted.append(entry_id)
        self.entries = [e for e in self.entries if e.entry_id != entry_id]


class RecordingNotifier:
    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def notify(self, message, level):
        self.messages.append((message, level))


class MemoryRateStore:
    def __init__(self, rate: Optional[float] = None):
        self.rate = rate

    def load(self):
        return self.rate

    def save(self, rate):
        self.rate = rate


class Answer:
    def __init__(self, yes: bool):
        self.yes = yes
        self.asked: list[str] = []

    def confirm(self, message):
        self.asked.append(message)
        return self.yes


def _controller(api, *, rate_store=None, default_rate=0.0):
    notifier = RecordingNotifier()
    controller = HoursController(
        api, EntriesState(), notifier, rate_store or MemoryRateStore(), default_rate=default_rate
    )
    return controller, notifier


def test_refresh_replaces_state():
    api = FakeApi([TimeEntry(entry_id=1, work_date=date(2024, 6, 3), hours=4)])
    controller, _ = _controller(api)

    state = controller.refresh()

    assert state.status == ViewStatus.LOADED
    assert [e.entry_id for e in state.entries] == [1]


def test_refresh_failure_resets_to_empty_with_message():
    api = FakeApi([TimeEntry(entry_id=1, work_date=date(2024, 6, 3), hours=4)])
    controller, _ = _controller(api)
    controller.refresh()

    api.fail_list = True
    state = controller.refresh()

    assert state.status == ViewStatus.ERROR
    assert state.entries == []
    assert state.message == "Unable to load entries. Check console for details."


def test_add_sends_request_then_refetches():
    api = FakeApi()
    controller, notifier = _controller(api)

    assert controller.add_entry("2024-06-03", "4") is True

    assert api.added == [(date(2024, 6, 3), 4.0)]
    assert api.list_calls == 1
    assert [e.hours for e in controller.state.entries] == [4.0]
    assert notifier.messages == []


def test_add_rejects_locally_without_request():
    api = FakeApi()
    controller, notifier = _controller(api)

    for date_text, hours_text in [("", "2"), ("2024-06-03", ""), ("2024-06-03", "0"), ("2024-06-03", "-3"), ("2024-06-03", "x"), ("2024-06-03", "inf"), ("2024-06-03", "1e5"), ("2024-06-03", "2.555")]:
        assert controller.add_entry(date_text, hours_text) is False

    assert api.added == []
    assert api.list_calls == 0
    assert set(notifier.messages) == {("Please enter a valid date and hours", "warning")}


def test_add_failure_leaves_state_untouched():
    api = FakeApi([TimeEntry(entry_id=1, work_date=date(2024, 6, 3), hours=4)])
    controller, notifier = _controller(api)
    controller.refresh()
    api.fail_add = True

    assert controller.add_entry("2024-06-04", "2") is False

    assert [e.entry_id for e in controller.state.entries] == [1]
    assert api.list_calls == 1
    assert notifier.messages == [("Failed to add entry. Please try again.", "danger")]


def test_delete_requires_confirmation():
    api = FakeApi([TimeEntry(entry_id=1, work_date=date(2024, 6, 3), hours=4)])
    controller, _ = _controller(api)
    answer = Answer(False)

    assert controller.delete_entry(1, answer) is False

    assert answer.asked == ["Delete this entry?"]
    assert api.deleted == []


def test_delete_confirmed_then_refetches():
    api = FakeApi([TimeEntry(entry_id=1, work_date=date(2024, 6, 3), hours=4)])
    controller, _ = _controller(api)

    assert controller.delete_entry(1, Answer(True)) is True

    assert api.deleted == [1]
    assert controller.state.entries == []
    assert controller.state.status == ViewStatus.LOADED


def test_delete_failure_notifies():
    api = FakeApi([TimeEntry(entry_id=1, work_date=date(2024, 6, 3), hours=4)])
    api.fail_delete = True
    controller, notifier = _controller(api)

    assert controller.delete_entry(1, Answer(True)) is False

    assert notifier.messages == [("Failed to delete entry. Please try again.", "danger")]
    assert api.list_calls == 0


def test_rate_defaults_and_changes_locally():
    api = FakeApi()
    store = MemoryRateStore()
    controller, notifier = _controller(api, rate_store=store, default_rate=12.0)

    assert controller.current_rate() == 12.0
    assert controller.change_rate("15.5") == 15.5
    assert store.rate == 15.5
    assert controller.current_rate() == 15.5
    assert api.list_calls == 0
    assert notifier.messages == []


def test_invalid_rate_keeps_previous():
    store = MemoryRateStore(10.0)
    controller, notifier = _controller(FakeApi(), rate_store=store)

    assert controller.change_rate("-1") == 10.0
    assert controller.change_rate("abc") == 10.0
    assert store.rate == 10.0
    assert notifier.messages == [("Please enter a valid hourly rate", "warning")] * 2


@pytest.mark.parametrize("value", ["inf", "-inf", "nan", "1e30", "10000.01"])
def test_unbounded_rate_is_rejected(value):
    store = MemoryRateStore(10.0)
    controller, notifier = _controller(FakeApi(), rate_store=store)

    assert controller.change_rate(value) == 10.0
    assert store.rate == 10.0
    assert notifier.messages == [("Please enter a valid hourly rate", "warning")]


def test_rate_at_upper_bound_is_kept():
    store = MemoryRateStore()
    controller, _ = _controller(FakeApi(), rate_store=store)

    assert controller.change_rate("10000") == 10000.0
    assert store.rate == 10000.0


def test_stored_rate_out_of_range_falls_back_to_default():
    controller, _ = _controller(FakeApi(), rate_store=MemoryRateStore(float("inf")), default_rate=12.0)

    assert controller.current_rate() == 12.0


def test_select_date():
    controller, _ = _controller(FakeApi())

    assert controller.select_date("2024-06-04") == date(2024, 6, 4)
    assert controller.select_date("garbage") is None
    assert controller.select_date(None) is None
