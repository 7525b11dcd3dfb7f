from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .client.api_client import HoursApiClient
from .client.controller import HoursApi
from .core.enums import WeekWindowKind
from .database.connection import DBConfig, DatabaseConnection
from .entries.mysql_entry_repository import MySQLEntryRepository
from .entries.repository import EntryRepository
from .entries.service import EntryService
from .summary.calculator import SummaryCalculator
from .summary.factory import WeekWindowFactory


@dataclass(frozen=True)
class Container:
    entries_repo: EntryRepository
    entry_service: EntryService
    api_client: HoursApi
    summary_calculator: SummaryCalculator
    default_hourly_rate: float = 0.0
    conn: Optional[DatabaseConnection] = None


def build_container(
    *,
    db_config: dict,
    api_base_url: str,
    api_timeout: float = 10.0,
    week_window: WeekWindowKind | str = WeekWindowKind.WORK_WEEK,
    default_hourly_rate: float = 0.0,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    entries_repo = MySQLEntryRepository(conn)
    entry_service = EntryService(entries_repo)
    api_client = HoursApiClient(api_base_url, timeout=api_timeout)
    summary_calculator = SummaryCalculator(WeekWindowFactory().for_kind(week_window))

    return Container(
        entries_repo=entries_repo,
        entry_service=entry_service,
        api_client=api_client,
        summary_calculator=summary_calculator,
        default_hourly_rate=float(default_hourly_rate),
        conn=conn,
    )
