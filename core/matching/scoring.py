#!/usr/bin/env python3
"""
Scoring - multi-factor worker/job scoring and ranking.

final_score = 0.40 * skill_overlap
            + 0.30 * availability_coverage
            + 0.20 * rate_fit
            + 0.10 * distance_score

Every component is in [0, 1] and the weights sum to 1.0, so the final
score is in [0, 1]. It is rounded to SCORE_PRECISION decimals for stable
ordering and display.

Malformed numeric input (reversed rate band, non-finite radius, degenerate
job window, missing job location) is absorbed by the component guards;
scoring never raises for well-typed input. Non-finite epoch
bounds are rejected by time_overlap.to_timestamp with ValueError.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

from core.matching.geodistance import distance_km
from core.matching.models import JobForMatching, WorkerForMatching, WorkerMatchScore
from core.matching.time_overlap import calculate_availability_coverage

logger = logging.getLogger(__name__)

SKILL_WEIGHT = 0.40
AVAILABILITY_WEIGHT = 0.30
RATE_WEIGHT = 0.20
DISTANCE_WEIGHT = 0.10

NEUTRAL_DISTANCE_SCORE = 0.5  # job without geodata
SCORE_PRECISION = 4


def compute_skill_overlap(needed_roles, skills: Sequence[str]) -> float:
    """Fraction of the job's needed roles covered by the worker's skills.

    A job needing no roles matches nobody.
    """
    needed = set(needed_roles)
    if not needed:
        return 0.0

    matched = sum(1 for skill in skills if skill in needed)
    return min(1.0, matched / len(needed))


def compute_rate_fit(job_rate: float, worker_min: float, worker_max: float) -> float:
    """
    Closeness of the job rate to the worker's acceptable band.

    1.0 inside the band (inclusive), linear falloff outside it, floored at 0.
    """
    if worker_max < worker_min:
        worker_min, worker_max = worker_max, worker_min

    if worker_min <= job_rate <= worker_max:
        return 1.0

    diff = worker_min - job_rate if job_rate < worker_min else job_rate - worker_max
    normalizer = max(worker_max, worker_min, job_rate, 1.0)
    fit = max(0.0, 1.0 - diff / normalizer)
    if math.isnan(fit):
        return 0.0
    return fit


def compute_distance_score(
    job: JobForMatching,
    worker: WorkerForMatching
) -> Tuple[Optional[float], float]:
    """
    Distance component for a worker.

    Returns: (distance_km, score). distance_km is None when the job has no location.
    """
    if job.location is None:
        return None, NEUTRAL_DISTANCE_SCORE

    distance = distance_km(job.location, worker.home_location)

    if not math.isfinite(worker.radius_km) or worker.radius_km <= 0:
        return distance, 0.0

    # Travel radius is a hard limit stated by the worker
    if not distance <= worker.radius_km:
        return distance, 0.0

    return distance, max(0.0, 1.0 - distance / worker.radius_km)


def score_worker_for_job(job: JobForMatching, worker: WorkerForMatching) -> WorkerMatchScore:
    """Score a single worker against a job."""
    skill_overlap = compute_skill_overlap(job.needed_roles, worker.skills)
    coverage = calculate_availability_coverage(job.window, worker.availability)
    rate_fit = compute_rate_fit(job.rate, worker.min_rate, worker.max_rate)
    distance, distance_score = compute_distance_score(job, worker)

    final_score = (
        skill_overlap * SKILL_WEIGHT +
        coverage.coverage_ratio * AVAILABILITY_WEIGHT +
        rate_fit * RATE_WEIGHT +
        distance_score * DISTANCE_WEIGHT
    )

    return WorkerMatchScore(
        worker_id=worker.id,
        worker_name=worker.name,
        skill_overlap=skill_overlap,
        rate_fit=rate_fit,
        distance_score=distance_score,
        availability_coverage=coverage.coverage_ratio,
        overlap_hours=coverage.overlap_hours,
        distance_km=distance,
        final_score=round(final_score, SCORE_PRECISION),
    )


def rank_workers_for_job(
    job: JobForMatching,
    workers: Sequence[WorkerForMatching]
) -> List[WorkerMatchScore]:
    """
    Score every worker and order them by final_score, highest first.

    The sort is stable, so equal scores keep their input order. No
    thresholds are applied here; see core.matching.policy.
    """
    scores = [score_worker_for_job(job, worker) for worker in workers]
    scores.sort(key=lambda s: s.final_score, reverse=True)

    logger.debug(f"Ranked {len(scores)} workers for job {job.id}")
    return scores
