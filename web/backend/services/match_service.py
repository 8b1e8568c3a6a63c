#!/usr/bin/env python3
"""
Match service - business logic around the ranking engine.

Fetches the job and candidate workers, converts them into engine inputs,
ranks them, applies the call-site result policy and, on request, makes a
booking offer to one of the candidates.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from core.config_loader import AppConfig, ResultPolicy
from core.matching import (
    JobForMatching,
    WorkerForMatching,
    WorkerMatchScore,
    apply_result_policy,
    filter_eligible_workers,
    rank_workers_for_job,
)
from core.matching.dto import InvalidMatchInputError, job_for_matching, worker_for_matching
from database.models import JobPosting, WorkerProfile
from database.repository import MarketplaceRepository
from notification.email_stub import EmailStubChannel
from notification.message_builder import OfferMessageBuilder
from ..models.responses import (
    AvailabilityPreview,
    CandidateSuggestion,
    InviteResult,
    MatchMetrics,
    MatchResponse,
    CandidatesResponse,
)
from ..exceptions import InvalidMatchInputException, JobNotFoundException, WorkerNotFoundException

logger = logging.getLogger(__name__)

AVAILABILITY_PREVIEW_SIZE = 3
UNKNOWN_WORKER_NAME = "Unknown worker"


class MatchService:
    """Service for ranking candidate workers and sending booking offers."""

    def __init__(self, db: Session, config: AppConfig):
        self.db = db
        self.repo = MarketplaceRepository(db)
        self.config = config
        self.email_channel = EmailStubChannel(config.email.outbox_dir)

    def suggest_candidates(self, job_id: Any, invite_worker_id: Optional[Any] = None) -> MatchResponse:
        """
        Rank eligible workers for a job and optionally invite one.

        Workers are pre-filtered (skills, rate band, radius, existing bookings,
        availability) before ranking; the suggestion policy is applied after.

        Args:
            job_id: Job posting ID.
            invite_worker_id: Worker to send a booking offer to.

        Returns:
            MatchResponse with ranked suggestions and the invite outcome.

        Raises:
            JobNotFoundException: If the job does not exist.
            WorkerNotFoundException: If the invite target is not an eligible worker.
            InvalidMatchInputException: If the job cannot be scored.
        """
        job = self._get_job(job_id)
        job_input = self._job_input(job)

        workers_by_id, worker_inputs = self._load_workers()
        booked = self.repo.bookings.booked_worker_ids(job.id)

        eligible = filter_eligible_workers(job_input, worker_inputs, booked, invite_worker_id)
        ranked = rank_workers_for_job(job_input, eligible)
        scores = apply_result_policy(ranked, self.config.matching.suggestion_policy)

        logger.info(
            f"Job {job.id}: {len(eligible)} eligible of {len(worker_inputs)} workers, "
            f"returning {len(scores)} suggestions"
        )

        invited = None
        if invite_worker_id is not None:
            eligible_ids = {w.id for w in eligible}
            if invite_worker_id not in eligible_ids:
                raise WorkerNotFoundException(f"Worker not found for invitation: {invite_worker_id}")
            invited = self.invite_worker(job, workers_by_id[invite_worker_id])

        return MatchResponse(
            job_id=str(job.id),
            count=len(scores),
            suggestions=[self._to_suggestion(s, workers_by_id[s.worker_id]) for s in scores],
            invited=invited,
        )

    def recommend_candidates(self, job_id: Any) -> CandidatesResponse:
        """
        Read-only ranking of every worker for a job, with no side effects.

        Raises:
            JobNotFoundException: If the job does not exist.
        """
        job = self._get_job(job_id)
        job_input = self._job_input(job)
        workers_by_id, worker_inputs = self._load_workers()

        scores = self.rank(job_input, worker_inputs, self.config.matching.recommendation_policy)

        return CandidatesResponse(
            job_id=str(job.id),
            count=len(scores),
            candidates=[self._to_suggestion(s, workers_by_id[s.worker_id]) for s in scores],
        )

    @staticmethod
    def rank(
        job: JobForMatching,
        workers: Sequence[WorkerForMatching],
        policy: Optional[ResultPolicy]
    ) -> List[WorkerMatchScore]:
        return apply_result_policy(rank_workers_for_job(job, workers), policy)

    def invite_worker(self, job: JobPosting, worker: WorkerProfile) -> InviteResult:
        """
        Offer the job to a worker and record an email stub.

        A failed stub write does not undo the booking; it is logged and
        reported as a missing path.
        """
        booking = self.repo.bookings.offer(job.id, worker.id)
        self.repo.commit()

        logger.info(f"Booking offer created: job={job.id} worker={worker.id} booking={booking.id}")

        user = worker.user
        recipient = (user.email if user else None) or self.config.email.fallback_recipient
        message = OfferMessageBuilder.build(
            job_title=job.title,
            job_start=job.start,
            rate=job.rate,
            worker_name=user.name if user else None,
        )

        email_stub_path = None
        try:
            email_stub_path = str(self.email_channel.send(recipient, message.subject, message.body))
            logger.info(f"Offer email stub recorded: {email_stub_path}")
        except OSError as e:
            logger.error(f"Failed to write offer email stub: {e}")

        return InviteResult(booking_id=str(booking.id), email_stub_path=email_stub_path)

    def _get_job(self, job_id: Any) -> JobPosting:
        job = self.repo.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFoundException(f"Job not found: {job_id}")
        return job

    @staticmethod
    def _job_input(job: JobPosting) -> JobForMatching:
        try:
            return job_for_matching(job)
        except InvalidMatchInputError as e:
            raise InvalidMatchInputException(f"Job {job.id} cannot be matched: {e}") from e

    def _load_workers(self) -> Tuple[Dict[Any, WorkerProfile], List[WorkerForMatching]]:
        """Fetch all workers; workers with unusable numeric data are skipped."""
        workers_by_id: Dict[Any, WorkerProfile] = {}
        worker_inputs: List[WorkerForMatching] = []

        for worker in self.repo.workers.list_all():
            try:
                worker_inputs.append(worker_for_matching(worker))
            except InvalidMatchInputError as e:
                logger.warning(f"Skipping worker {worker.id}: {e}")
                continue
            workers_by_id[worker.id] = worker

        return workers_by_id, worker_inputs

    @staticmethod
    def _to_suggestion(score: WorkerMatchScore, worker: WorkerProfile) -> CandidateSuggestion:
        user = worker.user
        slots = sorted(worker.availability, key=lambda slot: slot.start)[:AVAILABILITY_PREVIEW_SIZE]

        return CandidateSuggestion(
            worker_id=str(worker.id),
            worker_name=score.worker_name or UNKNOWN_WORKER_NAME,
            worker_email=user.email if user else None,
            skills=list(worker.skills or []),
            min_rate=worker.min_rate,
            max_rate=worker.max_rate,
            distance_km=score.distance_km,
            metrics=MatchMetrics(
                final_score=score.final_score,
                skill_overlap=score.skill_overlap,
                rate_fit=score.rate_fit,
                distance_score=score.distance_score,
                availability_coverage=score.availability_coverage,
                overlap_hours=score.overlap_hours,
            ),
            availability_preview=[
                AvailabilityPreview(
                    start=slot.start,
                    end=slot.end,
                    roles_ok=list(slot.roles_ok or []),
                    min_rate=slot.min_rate,
                )
                for slot in slots
            ],
        )
