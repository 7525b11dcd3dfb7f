"""Example: use the service layer and summary calculator without Flask."""

import importlib

from config import get_settings_module

from hours_tracker.common.datetime_utils import today_local
from hours_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, api_base_url=settings.API_BASE_URL)

    entries = container.entry_service.list_entries()
    calc = container.summary_calculator
    print(f"{len(entries)} entries, {calc.weekly_hours(entries, today_local())}h this week, "
          f"{calc.lifetime_hours(entries)}h total")


if __name__ == "__main__":
    main()
