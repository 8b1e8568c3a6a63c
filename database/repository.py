import logging

from sqlalchemy.orm import Session

from database.repositories import JobPostingRepository, WorkerRepository, BookingRepository

logger = logging.getLogger(__name__)


class MarketplaceRepository:
    """Facade over the per-table repositories, all bound to one session."""

    def __init__(self, db: Session):
        self.db = db
        self.jobs = JobPostingRepository(db)
        self.workers = WorkerRepository(db)
        self.bookings = BookingRepository(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
