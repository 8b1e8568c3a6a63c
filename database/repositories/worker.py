import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import WorkerProfile
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class WorkerRepository(BaseRepository):
    def _with_relations(self):
        # Eager load user and availability to avoid N+1 queries while scoring
        return select(WorkerProfile).options(
            selectinload(WorkerProfile.user),
            selectinload(WorkerProfile.availability),
        )

    def list_all(self) -> List[WorkerProfile]:
        # TODO: push skill and bounding-box filters into SQL once worker counts grow
        stmt = self._with_relations().order_by(WorkerProfile.created_at, WorkerProfile.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_by_id(self, worker_id: Any) -> Optional[WorkerProfile]:
        stmt = self._with_relations().where(WorkerProfile.id == worker_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def add(self, worker: WorkerProfile) -> WorkerProfile:
        self.db.add(worker)
        self.db.flush()
        return worker
