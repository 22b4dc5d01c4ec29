"""Timelines - Temporal Interval Algebra

Half-open periods, value-tagged periods, and timelines that reconcile
overlapping values into piecewise-constant functions of time.

Usage:
    from timelines import Timeline, month, day

    # Budget per month, with a one-day adjustment
    budget = Timeline()
    budget.add(month(2024, 1), 100)
    budget.add(month(2024, 2), 200)
    budget.add(day(2024, 1, 15), 80)

    # Slice overlaps and sum values on each slice
    resolved = budget.resolve_conflicts(lambda period, value, acc: value + acc, 0)

    # Merge contiguous slices carrying the same value
    compact = resolved.optimize()

    # Combine with another timeline
    total = budget.aggregate(other, lambda period, value, acc: value + acc, 0)
"""

__version__ = "0.1.0"

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    TimelineError,          # Base class (subclass of ValueError)
    InvalidIntervalError,   # Period end not after start
    NoOverlapError,         # Clamp limit does not intersect
    UnsortedTimelineError,  # Timeline items out of start order
)

# ============================================================================
# Period API
# ============================================================================

from .period.periodcore import (
    EPOCH,        # Instant used by the empty sentinel period
    Period,       # Half-open interval [start, end)
    next_day,     # Step function for Period.split
    next_month,   # Step function for Period.split
)

from .period.periodvalue import (
    PeriodValue,        # Period tagged with a value
    split_all_periods,  # Finest partition induced by a set of periods
    clamp_periods,      # Clamp items to a limit, dropping those outside
)

from .period.periodcalendar import (
    date_only,  # Midnight of a date
    day,        # One calendar day
    week,       # ISO week (Monday start)
    month,      # One calendar month
    quarter,    # Calendar quarter
    half,       # Half year
    year,       # Calendar year
)

# ============================================================================
# Timeline API
# ============================================================================

from .timeline.timelinecore import (
    Reducer,   # reducer(period, value, acc) -> acc
    Timeline,  # Start-sorted PeriodValues with reconciliation
)

from .timeline.timelineframe import (
    timeline_to_frame,    # Timeline -> DataFrame
    timeline_from_frame,  # DataFrame -> Timeline
)

__all__ = [
    "__version__",
    # Errors
    "TimelineError",
    "InvalidIntervalError",
    "NoOverlapError",
    "UnsortedTimelineError",
    # Period
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
    # Timeline
    "Reducer",
    "Timeline",
    "timeline_to_frame",
    "timeline_from_frame",
]
