#!/usr/bin/env python3
"""
Matching Models - inputs and outputs of the ranking engine.

All models are immutable and built fresh for every match request.
"""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Optional, Tuple

from core.matching.geodistance import Coordinate
from core.matching.time_overlap import DateLike, TimeRange


@dataclass(frozen=True)
class JobForMatching:
    """Job shift as seen by the engine. location=None disables geofencing."""
    id: Any
    needed_roles: FrozenSet[str]
    rate: float
    start: DateLike
    end: DateLike
    location: Optional[Coordinate] = None

    @property
    def window(self) -> TimeRange:
        return TimeRange(self.start, self.end)


@dataclass(frozen=True)
class WorkerForMatching:
    """Worker profile as seen by the engine."""
    id: Any
    skills: Tuple[str, ...]
    min_rate: float
    max_rate: float
    radius_km: float
    home_location: Coordinate
    availability: Tuple[TimeRange, ...] = field(default_factory=tuple)
    name: Optional[str] = None


@dataclass(frozen=True)
class WorkerMatchScore:
    """Scored candidate. Derived per request, never persisted."""
    worker_id: Any
    worker_name: Optional[str]
    skill_overlap: float
    rate_fit: float
    distance_score: float
    availability_coverage: float
    overlap_hours: float
    distance_km: Optional[float]
    final_score: float
