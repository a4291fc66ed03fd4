"""FastAPI application entry point.

Configures CORS, structured logging, lifespan events (including the
APScheduler session sweep), and router registration.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recruit.core.config import settings
from recruit.core.logging import setup_logging
from recruit.routers import admin, auth, health, hr, sessions
from recruit.scheduler.jobs import shutdown_scheduler, start_scheduler
from recruit.services.sessions import clear_sessions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks.

    Starts APScheduler on startup; on exit stops it and drops every
    in-memory browsing session.
    """
    setup_logging()
    logger.info("Application starting up")
    start_scheduler()
    yield
    shutdown_scheduler()
    clear_sessions()
    logger.info("Application shutting down")


app = FastAPI(
    title="SmartEd Recruit API",
    description="Access-key gated candidate profiles, bookmarks and CSV export",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Exported-Count"],
)

# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(sessions.router, prefix="/api/v1/sessions", tags=["Sessions"])
app.include_router(auth.router, prefix="/api/v1/auth", tags=["Auth"])
app.include_router(admin.router, prefix="/api/v1/admin", tags=["Admin"])
app.include_router(hr.router, prefix="/api/v1/hr", tags=["HR"])
