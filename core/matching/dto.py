#!/usr/bin/env python3
"""Conversion of stored records into engine inputs.

Records are duck-typed (ORM rows or any object with the same attributes),
so conversion happens while the session is still open and the engine only
ever sees plain immutable values.

Numeric fields are validated here: the engine itself absorbs malformed
values, but a NaN that reaches the sort would make the ranking
non-deterministic.
"""

import math
from typing import Any, Optional

from core.matching.geodistance import Coordinate
from core.matching.models import JobForMatching, WorkerForMatching
from core.matching.time_overlap import TimeRange


class InvalidMatchInputError(ValueError):
    """Raised when a stored record cannot be turned into a valid engine input."""
    pass


def _finite(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidMatchInputError(f"{field_name} is not a number: {value!r}") from e
    if not math.isfinite(number):
        raise InvalidMatchInputError(f"{field_name} must be finite, got {value!r}")
    return number


def to_coordinate(lat: Any, lng: Any) -> Coordinate:
    """Build a validated Coordinate from raw degrees."""
    lat = _finite(lat, 'lat')
    lng = _finite(lng, 'lng')
    if not -90.0 <= lat <= 90.0:
        raise InvalidMatchInputError(f"lat out of range: {lat}")
    if not -180.0 <= lng <= 180.0:
        raise InvalidMatchInputError(f"lng out of range: {lng}")
    return Coordinate(lat=lat, lng=lng)


def job_for_matching(job: Any) -> JobForMatching:
    """Convert a job posting record. Location requires both lat and lng."""
    location: Optional[Coordinate] = None
    if job.lat is not None and job.lng is not None:
        location = to_coordinate(job.lat, job.lng)

    return JobForMatching(
        id=job.id,
        needed_roles=frozenset(job.needed_roles or ()),
        rate=_finite(job.rate, 'rate'),
        start=job.start,
        end=job.end,
        location=location,
    )


def worker_display_name(worker: Any) -> Optional[str]:
    """User name, falling back to email."""
    user = getattr(worker, 'user', None)
    if user is None:
        return None
    return user.name or user.email or None


def worker_for_matching(worker: Any) -> WorkerForMatching:
    """Convert a worker profile record with its availability slots."""
    return WorkerForMatching(
        id=worker.id,
        name=worker_display_name(worker),
        skills=tuple(worker.skills or ()),
        min_rate=_finite(worker.min_rate, 'min_rate'),
        max_rate=_finite(worker.max_rate, 'max_rate'),
        # non-finite radii score 0 in the engine
        radius_km=float(worker.radius_km),
        home_location=to_coordinate(worker.home_lat, worker.home_lng),
        availability=tuple(
            TimeRange(slot.start, slot.end) for slot in (worker.availability or ())
        ),
    )
