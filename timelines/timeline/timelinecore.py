"""Timeline Reconciliation
-----------------------

A Timeline is a list of PeriodValues kept sorted by period start. Items may
overlap; the algorithms below turn such a list into a canonical one.

Operations:
  - resolve_conflicts: slice overlapping items into atomic periods and fold
    the values covering each slice with a reducer
  - optimize: merge contiguous items carrying equal values
  - aggregate: combine two timelines with a reducer

Key Design Principles:
  1. Sweep over start-sorted items, holding only the current overlapping
     cluster in memory
  2. Every result is a new Timeline; the receiver is left untouched
  3. The reducer and equality predicate are the only code inspecting values

Example:
    >>> budget = Timeline()
    >>> budget.add(month(2024, 1), 100)
    >>> budget.add(day(2024, 1, 15), 80)
    >>> [(str(i.period), i.value) for i in budget.resolve_conflicts(lambda p, a, b: a + b, 0)]
    [('[2024-01-01T00:00:00+00:00, 2024-01-15T00:00:00+00:00)', 100),
     ('[2024-01-15T00:00:00+00:00, 2024-01-16T00:00:00+00:00)', 180),
     ('[2024-01-16T00:00:00+00:00, 2024-02-01T00:00:00+00:00)', 100)]
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from timelines.errors import UnsortedTimelineError
from timelines.period.periodcore import Period
from timelines.period.periodvalue import PeriodValue, clamp_periods, split_all_periods

logger = logging.getLogger(__name__)

T = TypeVar("T")

# reducer(slice, value, accumulator) -> accumulator
Reducer = Callable[[Period, Any, Any], Any]


def _fold_cluster(buffer: List[PeriodValue], reducer: Reducer, identity: Any) -> List[PeriodValue]:
    """Reduce the values covering each atomic slice of an overlapping cluster."""
    items = []
    # Clusters are connected, so every slice is covered by at least one item
    for period in split_all_periods(buffer):
        acc = identity
        for candidate in buffer:
            if candidate.period.intersects(period):
                acc = reducer(period, candidate.value, acc)
        items.append(PeriodValue(period, acc))

    logger.debug(f"Folded cluster of {len(buffer)} items into {len(items)} slices")
    return items


class Timeline(Generic[T]):
    """Start-sorted collection of PeriodValues.

    Args:
        items: Initial PeriodValues, sorted on construction
    """

    def __init__(self, items: Optional[Iterable[PeriodValue[T]]] = None):
        self.items: List[PeriodValue[T]] = list(items) if items is not None else []
        self.sort_by_start()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[PeriodValue[T]]:
        return iter(self.items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Timeline):
            return NotImplemented
        return self.items == other.items

    def __repr__(self) -> str:
        return f"Timeline({self.items!r})"

    def sort_by_start(self) -> None:
        """Stable sort by period start; ties keep insertion order."""
        self.items.sort(key=lambda item: item.period.start)

    def get_all(self) -> List[PeriodValue[T]]:
        return self.items

    def add(self, period: Period, value: T) -> None:
        """Add a value for ``period``. Overlaps are kept for later resolution."""
        self.items.append(PeriodValue(period, value))
        self.sort_by_start()

    def find_intersects(self, period: Period) -> List[PeriodValue[T]]:
        """
        Return every item whose period intersects ``period``.

        The scan stops at the first item starting after ``period.end``.
        """
        found = []
        for item in self.items:
            if item.period.start > period.end:
                break
            if item.period.intersects(period):
                found.append(item)
        return found

    def resolve_conflicts(self, reducer: Reducer, identity: Any) -> Timeline[T]:
        """
        Slice overlapping items into atomic periods and reduce their values.

        Items are swept in start order and grouped into clusters of mutually
        overlapping periods. Each cluster is cut at every boundary it holds;
        each slice gets the fold of the values of all items covering it, in
        item order: ``acc = reducer(slice, value, acc)``. Items separated by
        a gap or only touching pass through as their own clusters.

        Args:
            reducer: ``reducer(slice, value, acc) -> acc``
            identity: Starting accumulator of every fold (e.g. 0 for sums).
                      ``reducer`` is applied to every covering value, so it
                      should satisfy ``reducer(p, x, identity)`` being the
                      contribution of ``x`` alone.

        Returns:
            New Timeline with sorted, non-overlapping periods

        Raises:
            UnsortedTimelineError: if an item starts before the cluster being
                                   accumulated. No partial result is returned.

        Example:
            >>> t = Timeline([PeriodValue(Period(0, 10), 1), PeriodValue(Period(5, 15), 2)])
            >>> [(i.period.start, i.period.end, i.value) for i in t.resolve_conflicts(lambda p, a, b: a + b, 0)]
            [(0, 5, 1), (5, 10, 3), (10, 15, 2)]
        """
        if not self.items:
            return Timeline()

        items: List[PeriodValue[T]] = []
        first = self.items[0]
        current = first.period
        buffer = [first]

        for item in self.items[1:]:
            if item.period.start < current.start:
                raise UnsortedTimelineError(
                    f"timeline should have sorted periods: {item.period} starts before {current}"
                )

            if item.period.after(current):
                items.extend(_fold_cluster(buffer, reducer, identity))
                current = item.period
                buffer = clamp_periods(buffer, current)
                buffer.append(item)
                continue

            current = Period(current.start, max(current.end, item.period.end))
            buffer.append(item)

        items.extend(_fold_cluster(buffer, reducer, identity))
        return Timeline(items)

    def optimize(self, equals: Callable[[Any, Any], bool] = operator.eq) -> Timeline[T]:
        """
        Merge consecutive contiguous items whose values are equal.

        Expects a reconciled timeline (see resolve_conflicts). The merged item
        spans from the first start to the last end and keeps the value.

        Args:
            equals: Value equality predicate (default: ``==``)
        """
        if not self.items:
            return Timeline()

        items = []
        previous = self.items[0]
        for item in self.items[1:]:
            if item.period.is_contiguous(previous.period) and equals(previous.value, item.value):
                previous = PeriodValue(Period(previous.period.start, item.period.end), previous.value)
                continue
            items.append(previous)
            previous = item

        items.append(previous)
        return Timeline(items)

    def aggregate(self, other: Timeline[T], reducer: Reducer, identity: Any) -> Timeline[T]:
        """
        Combine two timelines into one, reducing values where they overlap.

        When one side is empty the other is returned as is (as a copy).

        Args:
            other: Timeline to combine with
            reducer: ``reducer(slice, value, acc) -> acc``
            identity: Starting accumulator of every fold, see resolve_conflicts

        Raises:
            UnsortedTimelineError: propagated from resolve_conflicts
        """
        if not self.items:
            return Timeline(other.items)
        if not other.items:
            return Timeline(self.items)

        return Timeline(self.items + other.items).resolve_conflicts(reducer, identity)


__all__ = [
    "Reducer",
    "Timeline",
]
