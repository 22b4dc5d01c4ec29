"""Tabular view of timelines.

Converts between Timeline and pandas DataFrame with one row per item and
``start``, ``end``, ``value`` columns. Nothing is read from or written to disk.
"""

import logging

import pandas as pd

from timelines.period.periodvalue import PeriodValue
from timelines.timeline.timelinecore import Timeline

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["start", "end", "value"]


def timeline_to_frame(timeline: Timeline) -> pd.DataFrame:
    """
    Return the items of ``timeline`` as a DataFrame, in timeline order.

    Examples:
        >>> timeline_to_frame(timeline)[["start", "value"]].values
        array([[Timestamp('2024-01-01 00:00:00+0000', tz='UTC'), 100], ...])
    """
    rows = [
        {"start": item.period.start, "end": item.period.end, "value": item.value}
        for item in timeline
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def timeline_from_frame(
    df: pd.DataFrame,
    start_col: str = "start",
    end_col: str = "end",
    value_col: str = "value",
) -> Timeline:
    """
    Build a Timeline from a DataFrame, one item per row.

    Args:
        df: Source rows
        start_col: Column holding period starts
        end_col: Column holding period ends
        value_col: Column holding values

    Returns:
        Timeline sorted by start

    Raises:
        ValueError: if a column is missing
        InvalidIntervalError: if a row's end is not after its start
    """
    required = [start_col, end_col, value_col]
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    items = [
        PeriodValue.from_times(start, end, value)
        for start, end, value in zip(df[start_col], df[end_col], df[value_col])
    ]
    logger.info(f"Loaded {len(items)} period values from frame")
    return Timeline(items)


__all__ = [
    "FRAME_COLUMNS",
    "timeline_to_frame",
    "timeline_from_frame",
]
