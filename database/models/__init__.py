from .base import Base
from .user import User
from .worker import WorkerProfile, AvailabilitySlot
from .job import JobPosting
from .booking import Booking, BookingStatus

__all__ = [
    'Base',
    'User',
    'WorkerProfile',
    'AvailabilitySlot',
    'JobPosting',
    'Booking',
    'BookingStatus',
]
