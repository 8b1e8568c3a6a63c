import uuid

from sqlalchemy import Column, Text, Float, Integer, DateTime, Uuid, func, Index
from sqlalchemy.orm import relationship

from .base import Base, JSONList


class JobPosting(Base):
    """
    A shift posted by an employer.

    lat/lng are optional; without both the job cannot be geofenced.
    """
    __tablename__ = 'job_posting'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    employer_name = Column(Text)
    title = Column(Text, nullable=False)
    description = Column(Text)
    location_text = Column(Text)
    lat = Column(Float)
    lng = Column(Float)

    start = Column(DateTime(timezone=True), nullable=False)
    end = Column(DateTime(timezone=True), nullable=False)
    needed_roles = Column(JSONList, nullable=False, default=list)
    headcount = Column(Integer, nullable=False, default=1)
    rate = Column(Float, nullable=False)
    status = Column(Text, nullable=False, default='open')  # open|partially_filled|filled|cancelled

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    bookings = relationship("Booking", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_job_posting_status', 'status'),
    )
