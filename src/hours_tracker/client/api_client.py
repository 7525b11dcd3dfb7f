from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

import requests

from ..common.datetime_utils import format_iso_date
from ..core.exceptions import ApiError
from ..entries.model import TimeEntry

logger = logging.getLogger(__name__)

HOURS_PATH = "/api/hours"


class HoursApiClient:
    """HTTP client for the /api/hours resource.

    Every failure (network error, non-2xx status, undecodable body) is raised
    as ApiError; there are no retries.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self._url = base_url.rstrip("/") + HOURS_PATH
        self._timeout = timeout
        self._session = session or requests.Session()

    def list_entries(self) -> list[TimeEntry]:
        resp = self._send("GET")
        try:
            data = resp.json()
        except ValueError:
            raise ApiError("Invalid JSON in entries response", status_code=resp.status_code) from None

        if not isinstance(data, list):
            logger.error("Invalid data format: %r", data)
            return []

        try:
            return [TimeEntry.from_dict(row) for row in data]
        except (KeyError, TypeError, ValueError) as e:
            raise ApiError(f"Malformed entry in response: {e}", status_code=resp.status_code) from e

    def add_entry(self, *, work_date: date, hours: float) -> None:
        self._send("POST", json={"date": format_iso_date(work_date), "hours": hours})

    def delete_entry(self, entry_id: int) -> None:
        self._send("DELETE", json={"id": int(entry_id)})

    def _send(self, method: str, *, json: Any = None) -> requests.Response:
        try:
            resp = self._session.request(method, self._url, json=json, timeout=self._timeout)
        except requests.RequestException as e:
            raise ApiError(f"{method} {self._url} failed: {e}") from e

        if not resp.ok:
            logger.error("API Error Response (%s %s): %s", method, resp.status_code, resp.text)
            raise ApiError(f"{method} {self._url} returned {resp.status_code}", status_code=resp.status_code)
        return resp
