"""
Calendar week helpers.

Weeks start on Monday.  A Sunday belongs to the week that started six
days earlier, so the week of any date is ``[monday, monday + 6]``.
"""

import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from coachweek.core.config import settings

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
DAY_LABELS = ("M", "T", "W", "T", "F", "S", "S")

DAYS_IN_WEEK = 7

Clock = Callable[[], datetime.date]


def local_today(timezone: Optional[str] = None) -> datetime.date:
    """Current calendar date in ``timezone`` (``settings.TIMEZONE`` by default)."""
    return datetime.datetime.now(ZoneInfo(timezone or settings.TIMEZONE)).date()


def week_start(reference: datetime.date) -> datetime.date:
    """Monday of the week containing ``reference``."""
    return reference - datetime.timedelta(days=reference.weekday())


def week_dates(reference: datetime.date) -> list[datetime.date]:
    """The seven dates, Monday through Sunday, of ``reference``'s week."""
    monday = week_start(reference)
    return [monday + datetime.timedelta(days=offset) for offset in range(DAYS_IN_WEEK)]


def weekday_name(day: datetime.date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def day_label(day: datetime.date) -> str:
    return DAY_LABELS[day.weekday()]
