"""Tests for PeriodValue and the collection helpers."""

import pytest

from timelines import (
    InvalidIntervalError,
    NoOverlapError,
    Period,
    PeriodValue,
    clamp_periods,
    date_only,
    month,
    split_all_periods,
)


class TestPeriodValue:
    """Test PeriodValue construction and delegation"""

    def test_from_times(self):
        """Test building from raw instants"""
        item = PeriodValue.from_times(date_only(2024, 1, 10), date_only(2024, 1, 17), 80)
        assert item.period == Period(date_only(2024, 1, 10), date_only(2024, 1, 17))
        assert item.value == 80

    def test_from_times_invalid(self):
        """Test invalid instants raise InvalidIntervalError"""
        with pytest.raises(InvalidIntervalError):
            PeriodValue.from_times(date_only(2024, 1, 17), date_only(2024, 1, 10), 80)

    def test_clamp_keeps_value(self):
        """Test clamp narrows the period and keeps the value"""
        item = PeriodValue(month(2024, 1), {"budget": 100})
        limit = Period(date_only(2024, 1, 20), date_only(2024, 2, 10))
        clamped = item.clamp(limit)
        assert clamped.period == Period(date_only(2024, 1, 20), date_only(2024, 2, 1))
        assert clamped.value is item.value
        assert item.period == month(2024, 1)

    def test_clamp_outside(self):
        """Test clamp propagates NoOverlapError"""
        with pytest.raises(NoOverlapError):
            PeriodValue(month(2024, 1), 1).clamp(month(2024, 3))

    def test_is_empty(self):
        """Test emptiness follows the period"""
        assert not PeriodValue(month(2024, 1), 1).is_empty()
        assert PeriodValue(Period.empty(), 1).is_empty()


class TestSplitAllPeriods:
    """Test finest partition of a set of periods"""

    def test_nested_months(self, nested_budget):
        """Test months with nested January adjustments"""
        assert split_all_periods(nested_budget.items) == [
            Period(date_only(2024, 1, 1), date_only(2024, 1, 10)),
            Period(date_only(2024, 1, 10), date_only(2024, 1, 12)),
            Period(date_only(2024, 1, 12), date_only(2024, 1, 15)),
            Period(date_only(2024, 1, 15), date_only(2024, 1, 17)),
            Period(date_only(2024, 1, 17), date_only(2024, 2, 1)),
            Period(date_only(2024, 2, 1), date_only(2024, 3, 1)),
            Period(date_only(2024, 3, 1), date_only(2024, 4, 1)),
        ]

    def test_count_is_boundaries_minus_one(self):
        """Test output count equals distinct boundaries - 1"""
        items = [
            PeriodValue(Period(0, 10), "a"),
            PeriodValue(Period(0, 10), "b"),
            PeriodValue(Period(5, 20), "c"),
            PeriodValue(Period(20, 25), "d"),
        ]
        periods = split_all_periods(items)
        assert len(periods) == len({0, 10, 5, 20, 25}) - 1

    def test_tiles_union(self):
        """Test output is contiguous and spans the union"""
        items = [
            PeriodValue(Period(3, 9), "a"),
            PeriodValue(Period(0, 4), "b"),
            PeriodValue(Period(7, 12), "c"),
        ]
        periods = split_all_periods(items)
        assert periods[0].start == 0
        assert periods[-1].end == 12
        for previous, current in zip(periods, periods[1:]):
            assert previous.end == current.start

    def test_gap_becomes_slice(self):
        """Test a gap between inputs still yields a slice"""
        items = [PeriodValue(Period(0, 2), "a"), PeriodValue(Period(5, 6), "b")]
        assert split_all_periods(items) == [Period(0, 2), Period(2, 5), Period(5, 6)]

    def test_unordered_input(self):
        """Test input order does not matter"""
        items = [PeriodValue(Period(5, 6), "b"), PeriodValue(Period(0, 2), "a")]
        assert split_all_periods(items) == split_all_periods(list(reversed(items)))

    def test_empty(self):
        """Test empty input gives no periods"""
        assert split_all_periods([]) == []

    def test_single(self):
        """Test a single item gives its own period"""
        assert split_all_periods([PeriodValue(month(2024, 5), 1)]) == [month(2024, 5)]


class TestClampPeriods:
    """Test bulk clamping"""

    def test_drops_outside_items(self):
        """Test items outside the limit are dropped silently"""
        items = [
            PeriodValue(month(2024, 1), 100),
            PeriodValue(month(2024, 2), 200),
            PeriodValue(month(2024, 3), 300),
        ]
        limit = Period(date_only(2024, 2, 10), date_only(2024, 3, 5))
        assert clamp_periods(items, limit) == [
            PeriodValue(Period(date_only(2024, 2, 10), date_only(2024, 3, 1)), 200),
            PeriodValue(Period(date_only(2024, 3, 1), date_only(2024, 3, 5)), 300),
        ]

    def test_all_outside(self):
        """Test no survivors gives an empty list"""
        assert clamp_periods([PeriodValue(month(2024, 1), 1)], month(2024, 5)) == []

    def test_touching_dropped(self):
        """Test an item only touching the limit is dropped"""
        assert clamp_periods([PeriodValue(month(2024, 1), 1)], month(2024, 2)) == []
