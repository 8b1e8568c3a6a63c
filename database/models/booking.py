import enum
import uuid

from sqlalchemy import Column, Text, DateTime, Uuid, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship

from .base import Base


class BookingStatus(str, enum.Enum):
    OFFERED = 'offered'
    ACCEPTED = 'accepted'
    DECLINED = 'declined'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'


class Booking(Base):
    """
    Assignment of a worker to a job. One row per (job, worker) pair;
    re-inviting a worker flips the existing row back to 'offered'.
    """
    __tablename__ = 'booking'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    job_id = Column(Uuid, ForeignKey('job_posting.id', ondelete='CASCADE'), nullable=False)
    worker_id = Column(Uuid, ForeignKey('worker_profile.id', ondelete='CASCADE'), nullable=False)

    status = Column(Text, nullable=False, default=BookingStatus.OFFERED.value)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    job = relationship("JobPosting", back_populates="bookings")
    worker = relationship("WorkerProfile", back_populates="bookings")

    __table_args__ = (
        UniqueConstraint('job_id', 'worker_id', name='uq_booking_job_worker'),
    )
