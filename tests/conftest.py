"""Shared test fixtures and utilities for timelines tests."""

import pytest

from timelines import PeriodValue, Timeline, date_only, month


def add(period, value, acc):
    """Summing reducer used across timeline tests."""
    return value + acc


def pv(start, end, value):
    """Shorthand for PeriodValue.from_times."""
    return PeriodValue.from_times(start, end, value)


def as_tuples(timeline):
    """Flatten a timeline to (start, end, value) tuples for comparison."""
    return [(item.period.start, item.period.end, item.value) for item in timeline]


@pytest.fixture
def quarter_budget():
    """Jan 100, Feb 200, Mar 300 plus a 15 Jan adjustment of 80.

    Returns a sorted Timeline with the adjustment overlapping January.
    """
    return Timeline([
        PeriodValue(month(2024, 1), 100),
        PeriodValue(month(2024, 2), 200),
        PeriodValue(month(2024, 3), 300),
        pv(date_only(2024, 1, 15), date_only(2024, 1, 16), 80),
    ])


@pytest.fixture
def nested_budget():
    """Jan-Mar by month plus two nested January adjustments (80 and 50)."""
    return Timeline([
        PeriodValue(month(2024, 1), 100),
        PeriodValue(month(2024, 2), 200),
        PeriodValue(month(2024, 3), 300),
        pv(date_only(2024, 1, 10), date_only(2024, 1, 17), 80),
        pv(date_only(2024, 1, 12), date_only(2024, 1, 15), 50),
    ])
