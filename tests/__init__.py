#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Using unittest
    uv run python -m unittest discover tests -v

Database tests use an in-memory SQLite database, so no server is needed.
"""

from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.matching import Coordinate, JobForMatching, TimeRange, WorkerForMatching
from database.models import Base, User, WorkerProfile, AvailabilitySlot, JobPosting
from database.repositories import JobPostingRepository, WorkerRepository

NYC = Coordinate(lat=40.7128, lng=-74.006)
BROOKLYN = Coordinate(lat=40.7306, lng=-73.9352)
FAR_AWAY = Coordinate(lat=41.0, lng=-75.0)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


JOB_START = utc(2024, 2, 1, 12)
JOB_END = utc(2024, 2, 1, 20)


def make_job(**overrides) -> JobForMatching:
    """Usher/FOH shift in lower Manhattan, 12:00-20:00 UTC at $25/hr."""
    fields = dict(
        id="job_1",
        needed_roles=frozenset({"Usher", "FOH"}),
        rate=25.0,
        start=JOB_START,
        end=JOB_END,
        location=NYC,
    )
    fields.update(overrides)
    return JobForMatching(**fields)


def make_worker(**overrides) -> WorkerForMatching:
    """Brooklyn-based usher available 10:00-22:00 UTC at $20-30/hr."""
    fields = dict(
        id="worker_1",
        name="Alex",
        skills=("Usher", "Ticketing"),
        min_rate=20.0,
        max_rate=30.0,
        radius_km=50.0,
        home_location=BROOKLYN,
        availability=(TimeRange(utc(2024, 2, 1, 10), utc(2024, 2, 1, 22)),),
    )
    fields.update(overrides)
    return WorkerForMatching(**fields)


def create_sqlite_session_factory() -> sessionmaker:
    """In-memory SQLite shared across threads (needed by TestClient)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def add_worker(session, name, email, skills, min_rate, max_rate, radius_km, home, slots) -> WorkerProfile:
    user = User(name=name, email=email, role='worker')
    worker = WorkerProfile(
        user=user,
        skills=list(skills),
        min_rate=min_rate,
        max_rate=max_rate,
        radius_km=radius_km,
        home_lat=home.lat,
        home_lng=home.lng,
    )
    for start, end in slots:
        worker.availability.append(
            AvailabilitySlot(start=start, end=end, roles_ok=list(skills), min_rate=min_rate)
        )
    return WorkerRepository(session).add(worker)


def add_job(session, **overrides) -> JobPosting:
    fields = dict(
        employer_name="Arena Events",
        title="Concert ushers",
        description="Ushers and front of house staff for an evening concert.",
        location_text="Lower Manhattan",
        lat=NYC.lat,
        lng=NYC.lng,
        start=JOB_START,
        end=JOB_END,
        needed_roles=["Usher", "FOH"],
        headcount=2,
        rate=25.0,
    )
    fields.update(overrides)
    return JobPostingRepository(session).add(JobPosting(**fields))
