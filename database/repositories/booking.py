import logging
from typing import Any, Optional, Set

from sqlalchemy import select

from database.models import Booking, BookingStatus
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class BookingRepository(BaseRepository):
    def get_for_job_and_worker(self, job_id: Any, worker_id: Any) -> Optional[Booking]:
        stmt = select(Booking).where(
            Booking.job_id == job_id,
            Booking.worker_id == worker_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def booked_worker_ids(self, job_id: Any) -> Set[Any]:
        """IDs of all workers holding any booking on the job."""
        stmt = select(Booking.worker_id).where(Booking.job_id == job_id)
        return set(self.db.execute(stmt).scalars().all())

    def offer(self, job_id: Any, worker_id: Any) -> Booking:
        """Create an offer, or flip an existing booking back to 'offered'."""
        booking = self.get_for_job_and_worker(job_id, worker_id)

        if booking is not None:
            booking.status = BookingStatus.OFFERED.value
            logger.debug(f"Re-offering booking {booking.id}")
        else:
            booking = Booking(
                job_id=job_id,
                worker_id=worker_id,
                status=BookingStatus.OFFERED.value
            )
            self.db.add(booking)

        self.db.flush()
        return booking
