"""Half-open Time Periods
----------------------

A Period is the interval ``[start, end)``: start is included, end is excluded.
Adjacent periods therefore share a boundary without overlapping, which is what
lets a timeline be cut into atomic slices.

Instants are treated as opaque, totally ordered points. Anything supporting
``<``, ``==`` and subtraction works (datetime, date, pandas.Timestamp, numbers).

Examples:
    >>> jan = Period(datetime(2024, 1, 1), datetime(2024, 2, 1))
    >>> jan.duration()
    datetime.timedelta(days=31)

    >>> jan.clamp(Period(datetime(2024, 1, 15), datetime(2024, 3, 1)))
    Period(start=datetime.datetime(2024, 1, 15, 0, 0), end=datetime.datetime(2024, 2, 1, 0, 0))

    >>> len(list(jan.split_by_days()))
    31
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Iterator

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timelines.errors import InvalidIntervalError, NoOverlapError


# Both ends of the empty sentinel period
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def next_day(current):
    """Step function advancing one calendar day."""
    return current + relativedelta(days=1)


def next_month(current):
    """Step function advancing one calendar month."""
    return current + relativedelta(months=1)


def _format_instant(instant: Any) -> str:
    if hasattr(instant, "isoformat"):
        return instant.isoformat()
    return str(instant)


@dataclass(frozen=True)
class Period:
    """Half-open interval ``[start, end)``.

    Raises:
        InvalidIntervalError: if ``end`` is not strictly after ``start``
    """

    start: Any
    end: Any

    def __post_init__(self):
        if not self.start < self.end:
            raise InvalidIntervalError(
                f"end must be after start (start={self.start!r}, end={self.end!r})"
            )

    @classmethod
    def empty(cls) -> Period:
        """Return the empty sentinel period (both ends at EPOCH)."""
        period = object.__new__(cls)
        object.__setattr__(period, "start", EPOCH)
        object.__setattr__(period, "end", EPOCH)
        return period

    def __str__(self) -> str:
        return f"[{_format_instant(self.start)}, {_format_instant(self.end)})"

    # ---- Relations ----

    def duration(self):
        return self.end - self.start

    def contains(self, instant) -> bool:
        """Point membership, inclusive on both ends.

        Note: unlike the interval relations below, ``end`` itself counts as
        contained.
        """
        return self.start <= instant <= self.end

    def contains_period(self, other: Period) -> bool:
        """True if ``other`` is fully nested in this period."""
        return self.start <= other.start and self.end >= other.end

    def intersects(self, other: Period) -> bool:
        """Strict overlap test; periods that only touch do not intersect."""
        return self.start < other.end and self.end > other.start

    def before(self, other: Period) -> bool:
        return self.end <= other.start

    def after(self, other: Period) -> bool:
        return self.start >= other.end

    def is_contiguous(self, other: Period) -> bool:
        """True if the periods share a boundary with no gap and no overlap."""
        return self.end == other.start or self.start == other.end

    def is_empty(self) -> bool:
        return not self.start < self.end

    # ---- Transformations ----

    def clamp(self, limit: Period) -> Period:
        """
        Intersect this period with ``limit``.

        Args:
            limit: Bounding period

        Returns:
            The overlapping part of both periods

        Raises:
            NoOverlapError: if the periods do not intersect

        Example:
            >>> Period(date(2024, 1, 10), date(2024, 1, 20)).clamp(
            ...     Period(date(2024, 1, 15), date(2024, 1, 25)))
            Period(start=datetime.date(2024, 1, 15), end=datetime.date(2024, 1, 20))
        """
        if not self.intersects(limit):
            raise NoOverlapError(f"period {self} is outside limit {limit}")
        return Period(max(self.start, limit.start), min(self.end, limit.end))

    def split(self, step: Callable[[Any], Any]) -> Iterator[Period]:
        """
        Lazily cut the period into chunks ``[current, step(current))``.

        Chunks are produced until the cursor reaches ``end``. The last chunk
        is not clipped: if ``step`` overshoots ``end`` so does the last chunk.

        Args:
            step: Maps the current cursor to the next one

        Yields:
            Consecutive periods starting at ``start``

        Raises:
            InvalidIntervalError: if ``step`` does not move the cursor forward
        """
        current = self.start
        while current < self.end:
            following = step(current)
            yield Period(current, following)
            current = following

    def split_by_days(self) -> Iterator[Period]:
        return self.split(next_day)

    def split_by_months(self) -> Iterator[Period]:
        return self.split(next_month)

    def split_from_period(self, other: Period) -> Iterator[Period]:
        """
        Partition this period around its overlap with ``other``.

        Yields, in order: the part before ``other`` (if any), the overlap, and
        the part after ``other`` (if any). Yields nothing when the periods do
        not intersect.
        """
        if not self.intersects(other):
            return

        if self.start < other.start:
            yield Period(self.start, other.start)

        yield Period(max(self.start, other.start), min(self.end, other.end))

        if self.end > other.end:
            yield Period(other.end, self.end)


__all__ = [
    "EPOCH",
    "Period",
    "next_day",
    "next_month",
]
