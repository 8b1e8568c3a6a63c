#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


class MatchRequest(BaseModel):
    """Request to rank candidates for a job, optionally inviting one of them."""
    job_id: uuid.UUID = Field(..., description="Job posting to staff")
    invite_worker_id: Optional[uuid.UUID] = Field(
        None,
        description="Eligible worker to send a booking offer to"
    )
