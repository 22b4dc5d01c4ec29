"""Value-Tagged Periods
--------------------

A PeriodValue attaches an opaque value to a Period. The value is never
inspected here; reducers and equality predicates passed to Timeline are the
only code that looks at it.

Module-level helpers work on collections of PeriodValues:
  - split_all_periods: finest partition induced by all period boundaries
  - clamp_periods: clamp every item to a limit, dropping those outside
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Iterable, List, TypeVar

from timelines.errors import NoOverlapError
from timelines.period.periodcore import Period

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PeriodValue(Generic[T]):
    """A Period paired with a value."""

    period: Period
    value: T

    @classmethod
    def from_times(cls, start, end, value: T) -> PeriodValue[T]:
        """Build from raw instants, validating them through Period."""
        return cls(Period(start, end), value)

    def is_empty(self) -> bool:
        return self.period.is_empty()

    def clamp(self, limit: Period) -> PeriodValue[T]:
        """
        Clamp the period to ``limit``, keeping the value.

        Raises:
            NoOverlapError: if the period does not intersect ``limit``
        """
        return PeriodValue(self.period.clamp(limit), self.value)


def split_all_periods(items: Iterable[PeriodValue]) -> List[Period]:
    """
    Cut the extent of ``items`` at every distinct start and end instant.

    Every input period is exactly the union of consecutive output periods.
    The output holds one period fewer than there are distinct boundaries.

    Args:
        items: PeriodValues, in any order, possibly overlapping

    Returns:
        Sorted, contiguous atomic periods (empty list for empty input)

    Example:
        >>> split_all_periods([
        ...     PeriodValue(Period(1, 10), "a"),
        ...     PeriodValue(Period(4, 6), "b"),
        ... ])
        [Period(start=1, end=4), Period(start=4, end=6), Period(start=6, end=10)]
    """
    boundaries = set()
    for item in items:
        boundaries.add(item.period.start)
        boundaries.add(item.period.end)

    instants = sorted(boundaries)
    return [Period(start, end) for start, end in zip(instants, instants[1:])]


def clamp_periods(items: Iterable[PeriodValue[T]], limit: Period) -> List[PeriodValue[T]]:
    """
    Clamp every item to ``limit``.

    Items outside ``limit`` are expected here: they are dropped, not raised.
    """
    results = []
    for item in items:
        try:
            clamped = item.clamp(limit)
        except NoOverlapError:
            logger.debug(f"Dropping {item.period} outside {limit}")
            continue
        if not clamped.is_empty():
            results.append(clamped)
    return results


__all__ = [
    "PeriodValue",
    "split_all_periods",
    "clamp_periods",
]
