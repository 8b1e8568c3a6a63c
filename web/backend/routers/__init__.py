"""API route handlers."""

from .match import router as match_router
from .candidates import router as candidates_router
