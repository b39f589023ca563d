from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from ..core.constants import DISPLAY_DATE_FORMAT, ISO_DATE_FORMAT

DateLike = Union[date, str]


@dataclass(frozen=True)
class DateWindow:
    start_date: str
    end_date: str


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def format_iso_date(value: DateLike) -> str:
    """Zero-padded YYYY-MM-DD; range queries compare these strings directly."""
    return _as_date(value).strftime(ISO_DATE_FORMAT)


def format_display_date(value: DateLike) -> str:
    return _as_date(value).strftime(DISPLAY_DATE_FORMAT)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def today_utc() -> date:
    """UTC calendar date, used to stamp export file names."""
    return datetime.now(timezone.utc).date()


def dates_between(start: DateLike, end: DateLike) -> list[str]:
    """Inclusive list of ISO dates; empty when end is before start."""
    current = _as_date(start)
    last = _as_date(end)
    days: list[str] = []
    while current <= last:
        days.append(format_iso_date(current))
        current += timedelta(days=1)
    return days


def current_week_dates(today: Optional[date] = None) -> DateWindow:
    """Monday..Sunday week containing ``today``."""
    today = today or today_local()
    start = today - timedelta(days=today.weekday())
    end = start + timedelta(days=6)
    return DateWindow(start_date=format_iso_date(start), end_date=format_iso_date(end))


def current_month_dates(today: Optional[date] = None) -> DateWindow:
    today = today or today_local()
    start = today.replace(day=1)
    end = today.replace(day=calendar.monthrange(today.year, today.month)[1])
    return DateWindow(start_date=format_iso_date(start), end_date=format_iso_date(end))
