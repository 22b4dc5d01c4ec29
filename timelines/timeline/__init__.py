"""Timeline module: start-sorted collections of PeriodValues.

Public API:
    Timeline(items=None)
        .add(period, value)
        .find_intersects(period) -> list[PeriodValue]
        .resolve_conflicts(reducer, identity) -> Timeline
        .optimize(equals=operator.eq) -> Timeline
        .aggregate(other, reducer, identity) -> Timeline

    timeline_to_frame(timeline) -> pd.DataFrame
    timeline_from_frame(df) -> Timeline
"""

from timelines.timeline.timelinecore import (
    Reducer,
    Timeline,
)
from timelines.timeline.timelineframe import (
    timeline_to_frame,
    timeline_from_frame,
)

__all__ = [
    "Reducer",
    "Timeline",
    "timeline_to_frame",
    "timeline_from_frame",
]
