from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date


@dataclass(frozen=True)
class TimeEntry:
    """One logged babysitting session."""

    entry_id: int
    work_date: date
    hours: float
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.entry_id,
            "date": format_iso_date(self.work_date),
            "hours": self.hours,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TimeEntry":
        """Build from an API payload; hours arrive as number or numeric string."""
        created = data.get("created_at")
        return cls(
            entry_id=int(data["id"]),
            work_date=parse_iso_date(str(data["date"])[:10]),
            hours=float(data["hours"]),
            created_at=datetime.fromisoformat(created) if created else None,
        )
