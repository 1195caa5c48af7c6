"""FastAPI application entry point — wires everything together.

Usage:
    python -m advisor.main

Serves the questionnaire catalog and the recommendation endpoints.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from advisor.api.web import router as advisor_router
from advisor.config import settings

# ── Logging setup ────────────────────────────────────────────────────

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    stream=sys.stdout,
)
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = logging.getLogger(__name__)

# ── FastAPI lifespan ─────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle."""
    logger.info("Starting %s (env=%s)", settings.branding.advisor_name, settings.environment)
    try:
        yield
    finally:
        logger.info("%s shutdown complete", settings.branding.advisor_name)


# ── FastAPI app ──────────────────────────────────────────────────────

app = FastAPI(
    title="Equipment Finance Advisor API",
    description="Questionnaire-driven equipment financing recommendations",
    version="0.1.0",
    lifespan=lifespan,
)
app.include_router(advisor_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "environment": settings.environment,
        "advisor_name": settings.branding.advisor_name,
    }


# ── Entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    uvicorn.run(
        "advisor.main:app",
        host=settings.server.api_host,
        port=settings.server.api_port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
