#!/usr/bin/env python3
"""
Time Overlap - reasoning about overlapping time ranges.

Ranges may carry datetimes, dates, ISO-8601 strings or epoch seconds;
every bound is coerced to a UTC epoch timestamp before any arithmetic.
Naive datetimes are taken to be UTC.
"""

import math
from dataclasses import dataclass
from datetime import datetime, date, timezone
from typing import Any, Iterable, NamedTuple, Union

from dateutil import parser as date_parser

SECONDS_PER_HOUR = 3600.0

DateLike = Union[datetime, date, str, int, float]


@dataclass(frozen=True)
class TimeRange:
    """Half-open time window [start, end)."""
    start: DateLike
    end: DateLike


class AvailabilityCoverage(NamedTuple):
    """Aggregate coverage of a base window by availability ranges."""
    overlap_hours: float
    coverage_ratio: float


def to_timestamp(value: Any) -> float:
    """
    Coerce a date-like value to a UTC epoch timestamp in seconds.

    Raises:
        TypeError: If the value is not date-like
        ValueError: If a numeric value is NaN or infinite
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc).timestamp()
    if isinstance(value, str):
        return to_timestamp(date_parser.isoparse(value))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value):
            raise ValueError(f"Epoch seconds must be finite, got {value!r}")
        return float(value)
    raise TypeError(f"Unsupported date-like value: {value!r}")


def _duration_hours(start: float, end: float) -> float:
    return (end - start) / SECONDS_PER_HOUR


def overlap_hours(a: TimeRange, b: TimeRange) -> float:
    """Hours shared by two ranges; 0.0 when they do not intersect."""
    start = max(to_timestamp(a.start), to_timestamp(b.start))
    end = min(to_timestamp(a.end), to_timestamp(b.end))

    if end - start <= 0:
        return 0.0

    return _duration_hours(start, end)


def calculate_availability_coverage(
    base: TimeRange,
    ranges: Iterable[TimeRange]
) -> AvailabilityCoverage:
    """
    Aggregate how much of the base window the given ranges cover.

    Overlapping or duplicated ranges are summed, then capped at the base
    duration so coverage never exceeds 100%.

    Args:
        base: The window that needs coverage (e.g. a job shift)
        ranges: Availability windows to compare against

    Returns:
        AvailabilityCoverage(overlap_hours, coverage_ratio)
    """
    base_hours = max(0.0, _duration_hours(to_timestamp(base.start), to_timestamp(base.end)))

    if base_hours <= 0:
        return AvailabilityCoverage(0.0, 0.0)

    total = sum(overlap_hours(base, r) for r in ranges)
    capped_total = min(total, base_hours)

    return AvailabilityCoverage(
        overlap_hours=capped_total,
        coverage_ratio=min(1.0, capped_total / base_hours),
    )


def has_any_overlap(base: TimeRange, ranges: Iterable[TimeRange]) -> bool:
    """True if any range shares a positive duration with base."""
    return any(overlap_hours(base, r) > 0 for r in ranges)
