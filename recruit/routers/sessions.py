"""Access-key browsing endpoints (home flow).

POST   /sessions                          -- redeem a key, open a session
GET    /sessions/{id}                     -- session summary
DELETE /sessions/{id}                     -- "New Access Key" reset
GET    /sessions/{id}/candidates          -- filtered / sorted roster
PUT    /sessions/{id}/bookmarks/{cid}     -- bookmark
DELETE /sessions/{id}/bookmarks/{cid}     -- unbookmark
GET    /sessions/{id}/export              -- CSV of bookmarked candidates
PUT    /sessions/{id}/theme               -- set dark mode
POST   /sessions/{id}/theme/toggle        -- flip dark mode
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query

from recruit.core.config import settings
from recruit.core.constants import MSG_NO_SESSION_BOOKMARKS
from recruit.db.store import StoreError
from recruit.models.enums import NotificationVariant, SortKey, ViewMode
from recruit.models.notification import Notification
from recruit.models.session import (
    BookmarkChange,
    ExportNotice,
    RedeemRequest,
    RosterPage,
    SessionSummary,
    ThemeRequest,
)
from recruit.routers.downloads import csv_download, store_failure
from recruit.services import sessions
from recruit.services.access_keys import InvalidAccessKey
from recruit.services.export import NothingToExport, export_candidates

logger = logging.getLogger(__name__)

router = APIRouter()


def _load(session_id: str) -> sessions.BrowseSession:
    try:
        return sessions.get_session(session_id)
    except sessions.SessionNotFound as exc:
        raise HTTPException(status_code=404, detail="Session not found or expired") from exc


# ---------------------------------------------------------------------------
# Redeem / summary / reset
# ---------------------------------------------------------------------------

@router.post("", status_code=201, response_model=SessionSummary)
async def redeem_access_key(body: RedeemRequest) -> SessionSummary:
    """Validate and redeem an access key.

    400 for a malformed key, 404 when the key is not provisioned.
    """
    try:
        session = sessions.open_session(body.access_key)
    except InvalidAccessKey as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except sessions.AccessKeyNotFound as exc:
        raise HTTPException(
            status_code=404,
            detail={"title": "Invalid Access Key", "description": str(exc)},
        ) from exc
    except StoreError as exc:
        raise store_failure(exc, "redeem_access_key_failed") from exc

    summary = session.summary()
    summary.notification = Notification(
        title="Profiles Unlocked!",
        description=(
            f"{summary.total_unlocked} {summary.description.lower()} "
            "unlocked successfully."
        ),
    )
    return summary


@router.get("/{session_id}", response_model=SessionSummary)
async def session_summary(session_id: str) -> SessionSummary:
    return _load(session_id).summary()


@router.delete("/{session_id}", status_code=204)
async def reset_session(session_id: str) -> None:
    """Forget the key, the unlocked roster and all bookmarks."""
    try:
        sessions.close_session(session_id)
    except sessions.SessionNotFound as exc:
        raise HTTPException(status_code=404, detail="Session not found or expired") from exc


# ---------------------------------------------------------------------------
# Roster
# ---------------------------------------------------------------------------

@router.get("/{session_id}/candidates", response_model=RosterPage)
async def list_candidates(
    session_id: str,
    search: str = Query(default="", description="Substring of name, skill or summary"),
    domain: str | None = Query(default=None, description="Domain code or 'all'"),
    sort_by: SortKey = Query(default=SortKey.name),
    view_mode: ViewMode = Query(default=ViewMode.grid),
) -> RosterPage:
    """Return the session's unlocked candidates, filtered and sorted."""
    try:
        return sessions.browse(
            session_id,
            search=search,
            domain=domain,
            sort_by=sort_by,
            view_mode=view_mode,
        )
    except sessions.SessionNotFound as exc:
        raise HTTPException(status_code=404, detail="Session not found or expired") from exc


# ---------------------------------------------------------------------------
# Bookmarks
# ---------------------------------------------------------------------------

def _change_bookmark(session_id: str, candidate_id: str, bookmarked: bool) -> BookmarkChange:
    _load(session_id)
    try:
        session = sessions.set_bookmark(session_id, candidate_id, bookmarked)
    except sessions.CandidateNotUnlocked as exc:
        raise HTTPException(
            status_code=404,
            detail="Candidate is not part of the unlocked profiles",
        ) from exc

    if bookmarked:
        notification = Notification(
            title="Profile Bookmarked",
            description="Student profile added to your bookmarks.",
        )
    else:
        notification = Notification(
            title="Bookmark Removed",
            description="Student profile removed from bookmarks.",
        )
    return BookmarkChange(
        candidate_id=candidate_id,
        bookmarked=bookmarked,
        bookmarked_count=len(session.bookmarks),
        notification=notification,
    )


@router.put("/{session_id}/bookmarks/{candidate_id}", response_model=BookmarkChange)
async def add_bookmark(session_id: str, candidate_id: str) -> BookmarkChange:
    return _change_bookmark(session_id, candidate_id, True)


@router.delete("/{session_id}/bookmarks/{candidate_id}", response_model=BookmarkChange)
async def remove_bookmark(session_id: str, candidate_id: str) -> BookmarkChange:
    return _change_bookmark(session_id, candidate_id, False)


@router.get("/{session_id}/export", response_model=None)
async def export_bookmarked(session_id: str) -> Any:
    """Download bookmarked candidates as CSV.

    With no bookmarks, returns a notification instead of a file.
    """
    try:
        session, selected = sessions.bookmarked_candidates(session_id)
    except sessions.SessionNotFound as exc:
        raise HTTPException(status_code=404, detail="Session not found or expired") from exc

    try:
        result = export_candidates(
            selected,
            prefix=settings.EXPORT_FILENAME_PREFIX,
            access_key=session.access_key,
        )
    except NothingToExport:
        return ExportNotice(
            notification=Notification(
                title="No Bookmarks",
                description=MSG_NO_SESSION_BOOKMARKS,
                variant=NotificationVariant.destructive,
            )
        )
    return csv_download(result)


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

@router.put("/{session_id}/theme", response_model=SessionSummary)
async def set_theme(session_id: str, body: ThemeRequest) -> SessionSummary:
    _load(session_id)
    return sessions.set_theme(session_id, body.dark_mode).summary()


@router.post("/{session_id}/theme/toggle", response_model=SessionSummary)
async def toggle_theme(session_id: str) -> SessionSummary:
    _load(session_id)
    return sessions.toggle_theme(session_id).summary()
