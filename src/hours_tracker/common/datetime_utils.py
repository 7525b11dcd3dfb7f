from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def monday_of(day: date) -> date:
    """Monday of the calendar week containing `day` (Sunday closes the week)."""
    return day - timedelta(days=day.weekday())


def format_display_date(value: date) -> str:
    """Short display form, e.g. "Mon, Jun 3"."""
    return f"{value:%a}, {value:%b} {value.day}"
