import logging
from typing import Any, Optional

from sqlalchemy import select

from database.models import JobPosting
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class JobPostingRepository(BaseRepository):
    def get_by_id(self, job_id: Any) -> Optional[JobPosting]:
        stmt = select(JobPosting).where(JobPosting.id == job_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def add(self, job: JobPosting) -> JobPosting:
        self.db.add(job)
        self.db.flush()  # Generate ID
        return job
