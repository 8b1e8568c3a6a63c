#!/usr/bin/env python3
"""
GigMatch API - FastAPI Application

Serves candidate matching for the gig-staffing marketplace.

Usage:
    uv run python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI

from .config import get_config
from .exceptions import register_exception_handlers
from .rate_limit import add_rate_limit_handlers
from .routers import match_router, candidates_router

config = get_config()

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.logging.level.upper(), logging.INFO),
    format=config.logging.format
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application with routers and handlers."""
    app = FastAPI(
        title="GigMatch API",
        description="Worker-to-job matching for event staffing",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    add_rate_limit_handlers(app)
    register_exception_handlers(app)

    app.include_router(match_router)
    app.include_router(candidates_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "gigmatch-web"}

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting GigMatch Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
