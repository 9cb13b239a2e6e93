# posoffice/api/time_window.py
"""
Resolve the dashboard ``timeFrame`` token into a date predicate.

``today`` and ``yesterday`` are single days (``DATE(col) = :day``).
``lastWeek`` and ``lastMonth`` are inclusive ranges that end yesterday,
so the current day is never part of them. Unknown tokens fall back to
``today``.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

TODAY = "today"
YESTERDAY = "yesterday"
LAST_WEEK = "lastWeek"
LAST_MONTH = "lastMonth"

TIME_FRAMES = (TODAY, YESTERDAY, LAST_WEEK, LAST_MONTH)


def local_today() -> date:
    """Current local date (midnight is implied by using ``date``)."""
    return date.today()


def _months_back(d: date, months: int) -> date:
    """Same day ``months`` earlier; clamps to the last day of a shorter month."""
    year, month = d.year, d.month - months
    while month < 1:
        month += 12
        year -= 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))


@dataclass(frozen=True)
class TimeWindow:
    token: str
    start: date
    end: date

    @property
    def is_single_day(self) -> bool:
        return self.start == self.end

    def predicate(self, column: str) -> tuple[str, dict]:
        """SQL fragment + bind params restricting ``column`` to this window."""
        if self.is_single_day:
            return f"DATE({column}) = :day", {"day": self.start.isoformat()}
        return (
            f"DATE({column}) BETWEEN :start AND :end",
            {"start": self.start.isoformat(), "end": self.end.isoformat()},
        )


def normalize_time_frame(token: str | None) -> str:
    return token if token in TIME_FRAMES else TODAY


def resolve_time_window(token: str | None, today: date | None = None) -> TimeWindow:
    token = normalize_time_frame(token)
    today = today or local_today()
    yesterday = today - timedelta(days=1)

    if token == YESTERDAY:
        return TimeWindow(token, yesterday, yesterday)
    if token == LAST_WEEK:
        return TimeWindow(token, today - timedelta(days=7), yesterday)
    if token == LAST_MONTH:
        return TimeWindow(token, _months_back(today, 1), yesterday)
    return TimeWindow(TODAY, today, today)
