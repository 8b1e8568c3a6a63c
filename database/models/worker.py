import uuid

from sqlalchemy import Column, Float, DateTime, Uuid, ForeignKey, func, Index
from sqlalchemy.orm import relationship

from .base import Base, JSONList


class WorkerProfile(Base):
    """
    Worker profile: skills, acceptable hourly rate band, home base and travel radius.
    """
    __tablename__ = 'worker_profile'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=True)

    skills = Column(JSONList, nullable=False, default=list)
    min_rate = Column(Float, nullable=False)
    max_rate = Column(Float, nullable=False)
    radius_km = Column(Float, nullable=False)
    home_lat = Column(Float, nullable=False)
    home_lng = Column(Float, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="worker_profile")
    availability = relationship(
        "AvailabilitySlot",
        back_populates="worker",
        cascade="all, delete-orphan",
        order_by="AvailabilitySlot.start",
    )
    bookings = relationship("Booking", back_populates="worker", cascade="all, delete-orphan")


class AvailabilitySlot(Base):
    """A window in which the worker can take shifts."""
    __tablename__ = 'availability_slot'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    worker_id = Column(Uuid, ForeignKey('worker_profile.id', ondelete='CASCADE'), nullable=False)

    start = Column(DateTime(timezone=True), nullable=False)
    end = Column(DateTime(timezone=True), nullable=False)
    roles_ok = Column(JSONList, nullable=False, default=list)
    min_rate = Column(Float, nullable=False, default=0.0)

    worker = relationship("WorkerProfile", back_populates="availability")

    __table_args__ = (
        Index('idx_availability_worker_start', 'worker_id', 'start'),
    )
