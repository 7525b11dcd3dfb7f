from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.constants import HOURS_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_number
from .model import TimeEntry
from .repository import EntryRepository


class MySQLEntryRepository(EntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, `date`, hours, created_at
                FROM {HOURS_TABLE}
                ORDER BY `date` DESC, created_at DESC, id DESC
                """
            )
            rows = fetchall(cur)
            return [
                TimeEntry(
                    entry_id=int(r["id"]),
                    work_date=normalize_mysql_date(r["date"]),
                    hours=normalize_mysql_number(r["hours"]),
                    created_at=r.get("created_at"),
                )
                for r in rows
            ]

    def create(self, *, work_date: date, hours: float) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {HOURS_TABLE}(`date`, hours) VALUES(%s,%s)",
                (work_date, hours),
            )
            return int(cur.lastrowid)

    def delete(self, *, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {HOURS_TABLE} WHERE id=%s", (int(entry_id),))
            return cur.rowcount > 0
