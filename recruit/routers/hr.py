"""HR dashboard endpoints: roster search and persisted bookmarks."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query

from recruit.core.constants import MSG_NO_HR_BOOKMARKS
from recruit.db.store import StoreError
from recruit.models.bookmark import BookmarkCreate
from recruit.models.candidate import Candidate
from recruit.models.dashboard import BookmarkList, HROverview
from recruit.models.enums import NotificationVariant, SortKey
from recruit.models.notification import Notification
from recruit.models.session import ExportNotice
from recruit.routers.downloads import csv_download, store_failure
from recruit.services import hr
from recruit.services.export import NothingToExport

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/overview", response_model=HROverview)
async def hr_overview() -> HROverview:
    """Total profiles, bookmark count, domains and average GPA."""
    try:
        return hr.get_overview()
    except StoreError as exc:
        raise store_failure(exc, "hr_overview_failed") from exc


@router.get("/candidates", response_model=list[Candidate])
async def search_candidates(
    search: str = Query(default="", description="Substring of name, skill or summary"),
    domain: str | None = Query(default=None, description="Domain code or 'all'"),
    sort_by: SortKey = Query(default=SortKey.name),
) -> list[Candidate]:
    try:
        return hr.search_candidates(search=search, domain=domain, sort_by=sort_by)
    except StoreError as exc:
        raise store_failure(exc, "hr_search_candidates_failed") from exc


@router.get("/bookmarks", response_model=BookmarkList)
async def list_bookmarks() -> BookmarkList:
    try:
        return hr.bookmark_list()
    except StoreError as exc:
        raise store_failure(exc, "hr_list_bookmarks_failed") from exc


@router.post("/bookmarks", status_code=201, response_model=BookmarkList)
async def add_bookmark(body: BookmarkCreate) -> BookmarkList:
    """Persist a bookmark, then return the re-read collection."""
    try:
        return hr.add_bookmark(body.student_id, notes=body.notes)
    except hr.CandidateNotFound as exc:
        raise HTTPException(status_code=404, detail="Candidate not found") from exc
    except StoreError as exc:
        raise store_failure(exc, "hr_add_bookmark_failed") from exc


@router.delete("/bookmarks/{bookmark_id}", response_model=BookmarkList)
async def remove_bookmark(bookmark_id: str) -> BookmarkList:
    try:
        return hr.remove_bookmark(bookmark_id)
    except hr.BookmarkNotFound as exc:
        raise HTTPException(status_code=404, detail="Bookmark not found") from exc
    except StoreError as exc:
        raise store_failure(exc, "hr_remove_bookmark_failed") from exc


@router.get("/bookmarks/export", response_model=None)
async def export_bookmarks() -> Any:
    """Download bookmarked candidates as ``hr-bookmarked-profiles-<date>.csv``."""
    try:
        result = hr.export_bookmarks()
    except NothingToExport:
        return ExportNotice(
            notification=Notification(
                title="No Bookmarks",
                description=MSG_NO_HR_BOOKMARKS,
                variant=NotificationVariant.destructive,
            )
        )
    except StoreError as exc:
        raise store_failure(exc, "hr_export_bookmarks_failed") from exc
    return csv_download(result)
