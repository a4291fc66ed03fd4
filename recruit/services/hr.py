"""HR workflows: full-roster browsing and persisted bookmarks.

Every bookmark mutation is a remote create/delete followed by a full
re-read of the collection; there is no optimistic local update.  A failed
create or delete changes nothing and propagates; a failed re-read after a
saved change is logged and reported with ``refreshed=False``.  The
bookmark collection is global, not scoped to the signed-in user.
"""

from __future__ import annotations

import logging
from datetime import date

from recruit.core.config import settings
from recruit.db import store
from recruit.db.store import StoreError
from recruit.models.bookmark import Bookmark
from recruit.models.candidate import Candidate
from recruit.models.dashboard import BookmarkedCandidate, BookmarkList, HROverview, HRStats
from recruit.models.enums import SortKey
from recruit.models.notification import Notification
from recruit.services.export import ExportResult, export_candidates
from recruit.services.roster import available_domains, filter_candidates

logger = logging.getLogger(__name__)


class CandidateNotFound(LookupError):
    """No candidate with the requested id."""


class BookmarkNotFound(LookupError):
    """No bookmark with the requested record id."""


def compute_stats(candidates: list[Candidate], bookmarks: list[Bookmark]) -> HRStats:
    """Dashboard counters; average GPA to one decimal, ``0.0`` when empty."""
    average = (
        sum(c.gpa or 0 for c in candidates) / len(candidates) if candidates else 0.0
    )
    return HRStats(
        total_profiles=len(candidates),
        bookmarked=len(bookmarks),
        domains=len(available_domains(candidates)),
        average_gpa=f"{average:.1f}",
    )


def get_overview() -> HROverview:
    candidates = store.list_candidates()
    bookmarks = store.list_bookmarks()
    return HROverview(
        stats=compute_stats(candidates, bookmarks),
        domains=available_domains(candidates),
    )


def search_candidates(
    search: str = "",
    domain: str | None = None,
    sort_by: SortKey = SortKey.name,
) -> list[Candidate]:
    return filter_candidates(
        store.list_candidates(), search=search, domain=domain, sort_by=sort_by
    )


def bookmark_list() -> BookmarkList:
    """Re-read bookmarks and join each one to its candidate."""
    bookmarks = store.list_bookmarks()
    by_id = {c.id: c for c in store.list_candidates()}
    items = [
        BookmarkedCandidate(bookmark=b, candidate=by_id.get(b.student_id))
        for b in bookmarks
    ]
    return BookmarkList(bookmarks=items, total=len(items))


def _refresh_after(action: str, notification: Notification) -> BookmarkList:
    """Re-read after a saved mutation; a failed re-read does not undo it."""
    try:
        result = bookmark_list()
    except StoreError as exc:
        logger.warning(
            "bookmark_refresh_failed",
            extra={"action": action, "error_message": str(exc)},
        )
        return BookmarkList(refreshed=False, notification=notification)
    result.notification = notification
    return result


def add_bookmark(student_id: str, notes: str = "") -> BookmarkList:
    candidates = {c.id: c for c in store.list_candidates()}
    candidate = candidates.get(student_id)
    if candidate is None:
        raise CandidateNotFound(student_id)

    bookmark = store.create_bookmark(candidate, notes=notes)
    logger.info(
        "bookmark_created",
        extra={"bookmark_id": bookmark.id, "student_id": student_id},
    )
    return _refresh_after(
        "create",
        Notification(
            title="Bookmark Added",
            description=f"{candidate.name} has been bookmarked.",
        ),
    )


def remove_bookmark(bookmark_id: str) -> BookmarkList:
    if not store.delete_bookmark(bookmark_id):
        raise BookmarkNotFound(bookmark_id)
    logger.info("bookmark_deleted", extra={"bookmark_id": bookmark_id})
    return _refresh_after(
        "delete",
        Notification(title="Bookmark Removed", description="Bookmark has been removed."),
    )


def export_bookmarks(today: date | None = None) -> ExportResult:
    """Export every bookmarked candidate (raises ``NothingToExport``)."""
    bookmarked_ids = {b.student_id for b in store.list_bookmarks()}
    selected = [c for c in store.list_candidates() if c.id in bookmarked_ids]
    return export_candidates(
        selected, prefix=settings.HR_EXPORT_FILENAME_PREFIX, today=today
    )
