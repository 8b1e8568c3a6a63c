#!/usr/bin/env python3
"""
Eligibility - candidate pre-filter applied before ranking.

Narrows the worker pool to candidates who could plausibly take the shift:
- Shares at least one skill with the job's needed roles
- Accepts the job rate (inside their rate band)
- Lives within their travel radius of the job (when the job has a location)
- Is not already booked on the job (unless they are the invite target)
- Has availability overlapping the job window
"""

import logging
from typing import Any, Collection, List, Optional, Sequence

from core.matching.geodistance import is_within_radius
from core.matching.models import JobForMatching, WorkerForMatching
from core.matching.time_overlap import has_any_overlap

logger = logging.getLogger(__name__)


def is_eligible(
    job: JobForMatching,
    worker: WorkerForMatching,
    booked_worker_ids: Collection[Any] = (),
    invite_worker_id: Optional[Any] = None
) -> bool:
    """Check a single worker against the pre-filter rules."""
    if not any(skill in job.needed_roles for skill in worker.skills):
        return False

    if job.rate < worker.min_rate or job.rate > worker.max_rate:
        return False

    if job.location is not None and not is_within_radius(
        worker.home_location, job.location, worker.radius_km
    ):
        return False

    if worker.id in booked_worker_ids and worker.id != invite_worker_id:
        return False

    return has_any_overlap(job.window, worker.availability)


def filter_eligible_workers(
    job: JobForMatching,
    workers: Sequence[WorkerForMatching],
    booked_worker_ids: Collection[Any] = (),
    invite_worker_id: Optional[Any] = None
) -> List[WorkerForMatching]:
    """
    Return the eligible subset of workers, preserving input order.

    Args:
        job: Job being staffed
        workers: Full candidate pool
        booked_worker_ids: Workers already holding a booking on this job
        invite_worker_id: Worker being invited by this request, exempt from the booked rule

    Returns:
        Eligible workers
    """
    eligible = [
        worker for worker in workers
        if is_eligible(job, worker, booked_worker_ids, invite_worker_id)
    ]
    logger.debug(f"Job {job.id}: {len(eligible)}/{len(workers)} workers pass pre-filter")
    return eligible
