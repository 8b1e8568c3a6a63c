#!/usr/bin/env python3
"""
Matching Module - worker-to-job matching and ranking engine.

Public API:
- rank_workers_for_job: Score and order candidate workers for a job
- score_worker_for_job: Score a single worker against a job
- filter_eligible_workers: Pre-filter the candidate pool before ranking
- apply_result_policy: Post-ranking thresholds and truncation

The engine is split into focused, side-effect free modules:

- geodistance.py: Haversine distance and radius containment
- time_overlap.py: Interval overlap and availability coverage
- models.py: Engine inputs and outputs (JobForMatching, WorkerForMatching, WorkerMatchScore)
- scoring.py: Sub-scores, weighted composite and ranking
- eligibility.py: Candidate pre-filter used by the match endpoint
- policy.py: ResultPolicy application
- dto.py: Conversion from stored records to engine inputs
"""

from core.matching.geodistance import Coordinate, distance_km, is_within_radius
from core.matching.time_overlap import (
    TimeRange, AvailabilityCoverage,
    overlap_hours, calculate_availability_coverage, has_any_overlap
)
from core.matching.models import JobForMatching, WorkerForMatching, WorkerMatchScore
from core.matching.scoring import score_worker_for_job, rank_workers_for_job
from core.matching.eligibility import filter_eligible_workers, is_eligible
from core.matching.policy import apply_result_policy

__all__ = [
    'Coordinate', 'distance_km', 'is_within_radius',
    'TimeRange', 'AvailabilityCoverage',
    'overlap_hours', 'calculate_availability_coverage', 'has_any_overlap',
    'JobForMatching', 'WorkerForMatching', 'WorkerMatchScore',
    'score_worker_for_job', 'rank_workers_for_job',
    'filter_eligible_workers', 'is_eligible',
    'apply_result_policy',
]
