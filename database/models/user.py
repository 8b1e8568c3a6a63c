import uuid

from sqlalchemy import Column, Text, DateTime, Uuid, func, Index
from sqlalchemy.orm import relationship

from .base import Base


class User(Base):
    """
    Marketplace account. A worker or employer profile hangs off it.
    """
    __tablename__ = 'users'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, nullable=True, unique=True)
    name = Column(Text)
    role = Column(Text, nullable=False, default='worker')  # worker|employer|admin

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    worker_profile = relationship("WorkerProfile", back_populates="user", uselist=False)

    __table_args__ = (
        Index('idx_users_email', 'email'),
    )
