from datetime import date

import pytest

from hours_tracker.entries.model import TimeEntry
from hours_tracker.summary.calculator import SummaryCalculator
from hours_tracker.summary.pay import compute_pay
from hours_tracker.summary.windows.work_week import WorkWeekWindow


@pytest.mark.parametrize(
    "hours, rate, expected",
    [
        (4, 15, 60.0),
        (2.5, 15.5, 38.75),
        (1.333, 10, 13.33),
        (2.675, 1, 2.68),
        (3, 0, 0.0),
    ],
)
def test_compute_pay_rounds_to_cents(hours, rate, expected):
    assert compute_pay(hours, rate) == expected


def test_weekly_pay_uses_weekly_hours():
    entries = [
        TimeEntry(entry_id=1, work_date=date(2024, 6, 3), hours=4),
        TimeEntry(entry_id=2, work_date=date(2024, 6, 4), hours=2),
        TimeEntry(entry_id=3, work_date=date(2024, 5, 1), hours=10),
    ]

    assert SummaryCalculator(WorkWeekWindow()).weekly_pay(entries, date(2024, 6, 5), 12.5) == 75.0


def test_compute_pay_handles_large_amounts():
    assert compute_pay(4, 1e30) == 4e30
    assert compute_pay(9999.99, 10000) == 99999900.0


def test_compute_pay_passes_infinity_through():
    assert compute_pay(2, float("inf")) == float("inf")
