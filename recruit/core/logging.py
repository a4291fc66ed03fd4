"""Process-wide log setup, run once from the FastAPI lifespan.

Every module logs snake_case event names (``session_opened``,
``store_call_failed``, ...) with context in ``extra``; this module only
decides where those lines go and how they look.
"""

import logging
import sys

from recruit.core.config import settings


def setup_logging() -> None:
    """Route all records to stdout at ``settings.LOG_LEVEL``.

    Safe to call again: existing root handlers are replaced, so a reload
    under uvicorn does not duplicate lines.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Replace whatever handlers a previous call (or uvicorn) installed
    root.handlers.clear()
    root.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("apscheduler").setLevel(logging.WARNING)
