#!/usr/bin/env python3
"""
Per-client rate limiting for the matching endpoint.

Uses an in-process slowapi limiter. Counters live in memory and are not
shared between worker processes.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import get_config


def identify_request(request: Request) -> str:
    """
    Best-effort client identifier.

    Prefers the first X-Forwarded-For hop, then X-Real-IP, then the peer address.
    """
    forwarded = request.headers.get('x-forwarded-for')
    if forwarded:
        first_hop = forwarded.split(',')[0].strip()
        if first_hop:
            return first_hop

    real_ip = request.headers.get('x-real-ip')
    if real_ip and real_ip.strip():
        return real_ip.strip()

    return get_remote_address(request) or 'unknown'


def match_rate_limit() -> str:
    return get_config().rate_limit.match_requests


limiter = Limiter(
    key_func=identify_request,
    enabled=get_config().rate_limit.enabled
)


def add_rate_limit_handlers(app) -> None:
    """Attach the limiter to the FastAPI app state."""
    app.state.limiter = limiter
