"""Shared response helpers for CSV downloads and store failures."""

from __future__ import annotations

import logging

from fastapi import HTTPException
from starlette.responses import Response

from recruit.db.store import RecordShapeError, StoreError
from recruit.services.export import ExportResult

logger = logging.getLogger(__name__)


def csv_download(result: ExportResult) -> Response:
    """Wrap an export as a UTF-8 CSV attachment."""
    return Response(
        content=result.content.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
            "X-Exported-Count": str(result.count),
        },
    )


def store_failure(exc: StoreError, event: str) -> HTTPException:
    """Log a failed store call and build the 502 the caller should raise."""
    logger.error(
        event,
        extra={
            "collection": exc.collection,
            "action": exc.action,
            "malformed_fields": getattr(exc, "fields", None),
            "error_message": str(exc),
        },
    )
    if isinstance(exc, RecordShapeError):
        detail = f"Malformed {exc.collection} record: {', '.join(exc.fields)}"
    else:
        detail = f"Record store unavailable: {exc}"
    return HTTPException(status_code=502, detail=detail)
