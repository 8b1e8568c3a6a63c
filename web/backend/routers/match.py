#!/usr/bin/env python3
"""
Match endpoints - rank candidate workers for a job and send offers.
"""

import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from ..config import get_config
from ..dependencies import get_db
from ..rate_limit import limiter, match_rate_limit
from ..services.match_service import MatchService
from ..models.requests import MatchRequest
from ..models.responses import MatchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/match", tags=["match"])


@router.post("", response_model=MatchResponse)
@limiter.limit(match_rate_limit)
def run_match(
    request: Request,
    body: MatchRequest,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_config)
):
    """
    Rank eligible workers for a job.

    Workers are pre-filtered on skills, rate band, travel radius, existing
    bookings and availability, then ranked by final score. Only candidates
    with some skill overlap and availability coverage are returned, up to
    the configured suggestion limit.

    When invite_worker_id is given, that worker (who must be eligible)
    receives a booking offer and an email stub is written.
    """
    service = MatchService(db, config)
    return service.suggest_candidates(body.job_id, invite_worker_id=body.invite_worker_id)
