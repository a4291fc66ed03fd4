"""APScheduler job definitions and scheduler management.

Initializes a BackgroundScheduler with an IntervalTrigger that sweeps idle
browsing sessions, and provides start/shutdown/status helpers for the
FastAPI lifespan.
"""

from __future__ import annotations

import logging

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from recruit.core.config import settings
from recruit.services.sessions import sweep_expired_sessions

logger = logging.getLogger(__name__)

# Module-level scheduler instance (singleton)
scheduler = BackgroundScheduler()


def _sweep_job() -> None:
    """Wrapper that APScheduler calls on each interval tick."""
    removed = sweep_expired_sessions()
    logger.debug("session_sweep_tick", extra={"removed": removed})


def start_scheduler() -> None:
    """Configure and start the background scheduler.

    Adds the session sweep job with an IntervalTrigger using
    SESSION_SWEEP_INTERVAL_MINUTES from settings.
    """
    scheduler.add_job(
        _sweep_job,
        IntervalTrigger(minutes=settings.SESSION_SWEEP_INTERVAL_MINUTES),
        id="session_sweep",
        replace_existing=True,
    )
    scheduler.start()
    logger.info(
        "scheduler_started",
        extra={
            "interval_minutes": settings.SESSION_SWEEP_INTERVAL_MINUTES,
        },
    )


def shutdown_scheduler() -> None:
    """Shutdown the scheduler gracefully (FastAPI lifespan cleanup)."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("scheduler_stopped")


def is_scheduler_running() -> bool:
    """Check if the scheduler is currently running."""
    return scheduler.running
