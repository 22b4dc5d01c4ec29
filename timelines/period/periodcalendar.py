"""Calendar Period Constructors
----------------------------

Helpers building half-open Periods for calendar units. Every period ends at
the first instant of the next unit, so consecutive units are contiguous.

Supports:
  - Days: day(2024, 2, 29)
  - ISO weeks: week(2025, 2) (Monday start, isoweek library)
  - Months: month(2024, 1)
  - Quarters: quarter(2026, 1)
  - Halves: half(2026, 2)
  - Years: year(2025)

Timestamps are UTC midnight unless another ``tz`` is passed.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo

from dateutil.relativedelta import relativedelta

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from timelines.period.periodcore import Period, next_day, next_month


def date_only(year: int, month: int, day: int, *, tz: tzinfo = timezone.utc) -> datetime:
    """Return midnight of the given date."""
    return datetime(year, month, day, tzinfo=tz)


# ---- Unit Constructors ----

def day(year: int, month: int, day: int, *, tz: tzinfo = timezone.utc) -> Period:
    """
    Period covering one calendar day.

    Example:
        >>> day(2024, 1, 15)
        Period(start=datetime(2024, 1, 15, 0, 0, tzinfo=UTC),
               end=datetime(2024, 1, 16, 0, 0, tzinfo=UTC))
    """
    start = date_only(year, month, day, tz=tz)
    return Period(start, next_day(start))


def week(year: int, week: int, *, tz: tzinfo = timezone.utc) -> Period:
    """
    Period covering an ISO week, Monday to the following Monday.

    Example:
        >>> week(2025, 2).start
        datetime(2025, 1, 6, 0, 0, tzinfo=UTC)
    """
    monday = Week(year, week).monday()
    start = date_only(monday.year, monday.month, monday.day, tz=tz)
    return Period(start, start + relativedelta(weeks=1))


def month(year: int, month: int, *, tz: tzinfo = timezone.utc) -> Period:
    """Period from the first of the month to the first of the next month."""
    start = date_only(year, month, 1, tz=tz)
    return Period(start, next_month(start))


def quarter(year: int, quarter: int, *, tz: tzinfo = timezone.utc) -> Period:
    """
    Period covering a calendar quarter.

    Q1 = Jan-Mar, Q2 = Apr-Jun, Q3 = Jul-Sep, Q4 = Oct-Dec
    """
    if quarter not in (1, 2, 3, 4):
        raise ValueError(f"quarter must be 1-4, got {quarter}")
    start = date_only(year, 3 * (quarter - 1) + 1, 1, tz=tz)
    return Period(start, start + relativedelta(months=3))


def half(year: int, half: int, *, tz: tzinfo = timezone.utc) -> Period:
    """
    Period covering a half year.

    H1 = Jan-Jun, H2 = Jul-Dec
    """
    if half not in (1, 2):
        raise ValueError(f"half must be 1 or 2, got {half}")
    start = date_only(year, 6 * (half - 1) + 1, 1, tz=tz)
    return Period(start, start + relativedelta(months=6))


def year(year: int, *, tz: tzinfo = timezone.utc) -> Period:
    start = date_only(year, 1, 1, tz=tz)
    return Period(start, start + relativedelta(years=1))


__all__ = [
    "date_only",
    "day",
    "week",
    "month",
    "quarter",
    "half",
    "year",
]
