#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class MatchMetrics(BaseModel):
    """Score breakdown of a candidate."""
    final_score: float = Field(ge=0, le=1)
    skill_overlap: float = Field(ge=0, le=1)
    rate_fit: float = Field(ge=0, le=1)
    distance_score: float = Field(ge=0, le=1)
    availability_coverage: float = Field(ge=0, le=1)
    overlap_hours: float = Field(ge=0)


class AvailabilityPreview(BaseModel):
    """One availability slot of a candidate."""
    start: datetime
    end: datetime
    roles_ok: List[str] = []
    min_rate: float


class CandidateSuggestion(BaseModel):
    """A ranked candidate for a job."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "worker_id": "550e8400-e29b-41d4-a716-446655440000",
                "worker_name": "Alex",
                "worker_email": "alex@example.com",
                "skills": ["Usher", "Ticketing"],
                "min_rate": 20.0,
                "max_rate": 30.0,
                "distance_km": 6.27,
                "metrics": {
                    "final_score": 0.7875,
                    "skill_overlap": 0.5,
                    "rate_fit": 1.0,
                    "distance_score": 0.8746,
                    "availability_coverage": 1.0,
                    "overlap_hours": 8.0
                },
                "availability_preview": []
            }
        }
    )

    worker_id: str
    worker_name: str
    worker_email: Optional[str] = None
    skills: List[str] = []
    min_rate: float
    max_rate: float
    distance_km: Optional[float] = None
    metrics: MatchMetrics
    availability_preview: List[AvailabilityPreview] = []


class InviteResult(BaseModel):
    """Outcome of the booking offer side effect."""
    booking_id: str
    email_stub_path: Optional[str] = None


class MatchResponse(BaseModel):
    """Response for POST /api/match."""
    success: bool = True
    job_id: str
    count: int
    suggestions: List[CandidateSuggestion]
    invited: Optional[InviteResult] = None


class CandidatesResponse(BaseModel):
    """Response for GET /api/jobs/{job_id}/candidates."""
    success: bool = True
    job_id: str
    count: int
    candidates: List[CandidateSuggestion]
