from __future__ import annotations

import json
from datetime import date

import pytest
import requests

from hours_tracker.client.api_client import HoursApiClient
from hours_tracker.core.exceptions import ApiError


class FakeResponse:
    def __init__(self, status_code: int, payload=None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str, object, float]] = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url, json, timeout))
        if self.error:
            raise self.error
        return self.response


def test_list_entries_parses_rows_and_coerces_hours():
    session = FakeSession(
        FakeResponse(
            200,
            [
                {"id": 2, "date": "2024-06-04", "hours": "2.50", "created_at": "2024-06-04T10:00:00"},
                {"id": 1, "date": "2024-06-03T00:00:00.000Z", "hours": 4, "created_at": None},
            ],
        )
    )
    client = HoursApiClient("http://api.test/", timeout=3, session=session)

    entries = client.list_entries()

    assert session.calls == [("GET", "http://api.test/api/hours", None, 3)]
    assert [(e.entry_id, e.work_date, e.hours) for e in entries] == [
        (2, date(2024, 6, 4), 2.5),
        (1, date(2024, 6, 3), 4.0),
    ]
    assert entries[0].created_at.hour == 10


def test_list_entries_non_array_body_yields_empty_list():
    client = HoursApiClient("http://api.test", session=FakeSession(FakeResponse(200, {"rows": []})))

    assert client.list_entries() == []


def test_list_entries_non_success_status_raises():
    client = HoursApiClient("http://api.test", session=FakeSession(FakeResponse(500, {"error": "db down"})))

    with pytest.raises(ApiError) as exc:
        client.list_entries()
    assert exc.value.status_code == 500


def test_list_entries_undecodable_body_raises():
    client = HoursApiClient("http://api.test", session=FakeSession(FakeResponse(200, None, text="<html>")))

    with pytest.raises(ApiError):
        client.list_entries()


def test_network_error_is_wrapped():
    session = FakeSession(error=requests.ConnectionError("refused"))
    client = HoursApiClient("http://api.test", session=session)

    with pytest.raises(ApiError) as exc:
        client.list_entries()
    assert exc.value.status_code is None


def test_add_entry_posts_iso_date_and_hours():
    session = FakeSession(FakeResponse(200, {"success": True}))
    client = HoursApiClient("http://api.test", timeout=5, session=session)

    client.add_entry(work_date=date(2024, 6, 3), hours=4.0)

    assert session.calls == [("POST", "http://api.test/api/hours", {"date": "2024-06-03", "hours": 4.0}, 5)]


def test_add_entry_rejected_raises():
    client = HoursApiClient("http://api.test", session=FakeSession(FakeResponse(400, {"error": "Invalid date or hours"})))

    with pytest.raises(ApiError):
        client.add_entry(work_date=date(2024, 6, 3), hours=4.0)


def test_delete_entry_sends_id_in_body():
    session = FakeSession(FakeResponse(200, {"success": True}))
    client = HoursApiClient("http://api.test", session=session)

    client.delete_entry(9)

    assert session.calls[0][:3] == ("DELETE", "http://api.test/api/hours", {"id": 9})
