#!/usr/bin/env python3
"""
Candidate recommendation endpoints - read-only ranking for a job.
"""

import uuid
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from ..config import get_config
from ..dependencies import get_db
from ..services.match_service import MatchService
from ..models.responses import CandidatesResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["candidates"])


@router.get("/{job_id}/candidates", response_model=CandidatesResponse)
def get_job_candidates(
    job_id: uuid.UUID,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_config)
):
    """
    Recommend candidates for a job.

    Ranks every worker without pre-filtering and without side effects.
    """
    service = MatchService(db, config)
    return service.recommend_candidates(job_id)
