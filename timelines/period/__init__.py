"""Period module: half-open time intervals and value-tagged periods.

Public API:
    Period(start, end)
        Half-open interval [start, end); raises InvalidIntervalError if end <= start

    PeriodValue(period, value)
        Period tagged with an opaque value

    split_all_periods(items) -> list[Period]
        Finest partition induced by all boundaries of items

    clamp_periods(items, limit) -> list[PeriodValue]
        Clamp items to limit, dropping those outside

    day / week / month / quarter / half / year
        Calendar period constructors (UTC by default)

Examples:
    >>> from timelines.period import Period, month, day
    >>>
    >>> jan = month(2024, 1)
    >>> jan.contains_period(day(2024, 1, 15))
    True
    >>>
    >>> # Three-way split around an inner period
    >>> feb = month(2024, 2)
    >>> [str(p) for p in feb.split_from_period(day(2024, 2, 15))]
    ['[2024-02-01T00:00:00+00:00, 2024-02-15T00:00:00+00:00)',
     '[2024-02-15T00:00:00+00:00, 2024-02-16T00:00:00+00:00)',
     '[2024-02-16T00:00:00+00:00, 2024-03-01T00:00:00+00:00)']
"""

from timelines.period.periodcore import (
    EPOCH,
    Period,
    next_day,
    next_month,
)
from timelines.period.periodvalue import (
    PeriodValue,
    split_all_periods,
    clamp_periods,
)
from timelines.period.periodcalendar import (
    date_only,
    day,
    week,
    month,
    quarter,
    half,
    year,
)

__all__ = [
    "EPOCH",
    "Period",
    "next_day",
    "next_month",
    "PeriodValue",
    "split_all_periods",
    "clamp_periods",
    "date_only",
    "day",
    "week",
    "month",
    "quarter",
    "half",
    "year",
]
