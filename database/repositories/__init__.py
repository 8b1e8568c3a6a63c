from database.repositories.base import BaseRepository
from database.repositories.job_posting import JobPostingRepository
from database.repositories.worker import WorkerRepository
from database.repositories.booking import BookingRepository

__all__ = [
    'BaseRepository',
    'JobPostingRepository',
    'WorkerRepository',
    'BookingRepository',
]
