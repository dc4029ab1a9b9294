from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def one_week_back(today: date) -> date:
    return today - timedelta(days=7)


def one_month_back(today: date) -> date:
    """Same day one calendar month earlier, clamped to that month's last day.

    Mar 15 -> Feb 15, Mar 31 -> Feb 29. The monthly window is a rolling
    calendar month, not "from the first day of the previous month"; that
    reading was considered and rejected.
    """
    year, month = (today.year - 1, 12) if today.month == 1 else (today.year, today.month - 1)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(today.day, last_day))
