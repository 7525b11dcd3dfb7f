"""Pure functions turning EntriesState into view models for the templates.

Nothing here touches the network, the session or the clock; callers pass
`today` and the hourly rate in.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import format_display_date, format_iso_date, monday_of
from ..core.constants import CURRENCY_SYMBOL, EMPTY_STATE_MESSAGE, LOAD_ERROR_MESSAGE
from ..core.enums import ViewStatus
from ..summary.calculator import SummaryCalculator
from ..summary.pay import compute_pay
from .state import EntriesState

WORKDAY_KEYS = ("mon", "tue", "wed", "thu", "fri")


@dataclass(frozen=True)
class EntryRow:
    entry_id: int
    date_label: str
    hours_label: str
    pay_label: Optional[str] = None


@dataclass(frozen=True)
class EntryListView:
    rows: list[EntryRow]
    placeholder: Optional[str] = None


@dataclass(frozen=True)
class DayCard:
    key: str
    weekday_label: str
    iso_date: str
    day_number: int
    hours: float
    hours_label: str
    has_hours: bool


@dataclass(frozen=True)
class SummaryView:
    weekly_hours: float
    weekly_hours_label: str
    lifetime_hours: float
    lifetime_hours_label: str
    weekly_pay_label: Optional[str] = None


@dataclass(frozen=True)
class DashboardView:
    entry_list: EntryListView
    day_cards: list[DayCard]
    summary: SummaryView
    hourly_rate: float
    form_date: str
    form_hours: str = ""
    focus_hours: bool = False


def format_number(value: float) -> str:
    """4.0 -> "4", 2.5 -> "2.5", 1.25 -> "1.25"."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def format_hours_label(hours: float) -> str:
    return f"{format_number(hours)} {'hour' if hours == 1 else 'hours'}"


def format_short_hours(hours: float) -> str:
    return f"{format_number(hours)}h" if hours > 0 else "0h"


def format_money(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


def render_entry_list(state: EntriesState, rate: float = 0.0) -> EntryListView:
    if state.status == ViewStatus.ERROR:
        return EntryListView(rows=[], placeholder=state.message or LOAD_ERROR_MESSAGE)
    if state.is_empty:
        return EntryListView(rows=[], placeholder=EMPTY_STATE_MESSAGE)

    rows = [
        EntryRow(
            entry_id=e.entry_id,
            date_label=format_display_date(e.work_date),
            hours_label=format_hours_label(e.hours),
            pay_label=format_money(compute_pay(e.hours, rate)) if rate > 0 else None,
        )
        for e in state.entries
    ]
    return EntryListView(rows=rows)


def render_day_cards(state: EntriesState, today: date, calculator: SummaryCalculator) -> list[DayCard]:
    monday = monday_of(today)
    cards: list[DayCard] = []
    for offset, key in enumerate(WORKDAY_KEYS):
        day = monday + timedelta(days=offset)
        hours = calculator.hours_on(state.entries, day)
        cards.append(
            DayCard(
                key=key,
                weekday_label=f"{day:%a}",
                iso_date=format_iso_date(day),
                day_number=day.day,
                hours=hours,
                hours_label=format_short_hours(hours),
                has_hours=hours > 0,
            )
        )
    return cards


def render_summary(state: EntriesState, calculator: SummaryCalculator, today: date, rate: float = 0.0) -> SummaryView:
    weekly = calculator.weekly_hours(state.entries, today)
    lifetime = calculator.lifetime_hours(state.entries)
    return SummaryView(
        weekly_hours=weekly,
        weekly_hours_label=format_short_hours(weekly),
        lifetime_hours=lifetime,
        lifetime_hours_label=format_short_hours(lifetime),
        weekly_pay_label=format_money(compute_pay(weekly, rate)) if rate > 0 else None,
    )


def render_dashboard(
    state: EntriesState,
    *,
    calculator: SummaryCalculator,
    today: date,
    rate: float = 0.0,
    form_date: Optional[date] = None,
    form_hours: str = "",
    focus_hours: bool = False,
) -> DashboardView:
    return DashboardView(
        entry_list=render_entry_list(state, rate),
        day_cards=render_day_cards(state, today, calculator),
        summary=render_summary(state, calculator, today, rate),
        hourly_rate=rate,
        form_date=format_iso_date(form_date or today),
        form_hours=form_hours,
        focus_hours=focus_hours,
    )
