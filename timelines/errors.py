"""Exceptions raised by the timelines package.

All errors derive from ValueError so callers that already guard bad input
with ``except ValueError`` keep working.
"""


class TimelineError(ValueError):
    """Base class for timelines errors."""


class InvalidIntervalError(TimelineError):
    """Raised when a period's end is not strictly after its start."""


class NoOverlapError(TimelineError):
    """Raised when clamping a period against a limit it does not intersect."""


class UnsortedTimelineError(TimelineError):
    """Raised when a timeline's items are not ordered by start."""


__all__ = [
    "TimelineError",
    "InvalidIntervalError",
    "NoOverlapError",
    "UnsortedTimelineError",
]
