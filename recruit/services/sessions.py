"""In-process registry of access-key browsing sessions.

A session is opened by redeeming an access key and owns the unlocked
candidates, the bookmark set, the current filter state and the theme flag.
Nothing is persisted: closing the session ("New Access Key"), the idle
sweep, or a process restart discards it.

The registry is guarded by a ``threading.Lock``; each session's own state
is only touched while the lock is held.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from recruit.core.config import settings
from recruit.core.constants import MSG_KEY_NOT_FOUND
from recruit.models.candidate import Candidate
from recruit.models.enums import SortKey, ViewMode
from recruit.models.session import FilterState, RosterPage, SessionSummary
from recruit.services.access_keys import resolve_roster, validate_access_key
from recruit.services.bookmarks import BookmarkSet
from recruit.services.roster import available_domains, filter_candidates, load_roster

logger = logging.getLogger(__name__)


class AccessKeyNotFound(LookupError):
    """Well-formed key that is not provisioned (or has expired)."""

    def __init__(self, access_key: str) -> None:
        super().__init__(MSG_KEY_NOT_FOUND)
        self.access_key = access_key


class SessionNotFound(LookupError):
    """Unknown or expired session id."""


class CandidateNotUnlocked(LookupError):
    """Candidate id is not part of the session's unlocked roster."""


@dataclass
class BrowseSession:
    """State of one browsing session."""
    session_id: str
    access_key: str
    description: str
    candidates: list[Candidate]
    bookmarks: BookmarkSet = field(default_factory=BookmarkSet)
    filters: FilterState = field(default_factory=FilterState)
    dark_mode: bool = False
    last_seen: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> SessionSummary:
        return SessionSummary(
            session_id=self.session_id,
            access_key=self.access_key,
            description=self.description,
            total_unlocked=len(self.candidates),
            bookmarked_count=len(self.bookmarks),
            bookmarked_ids=list(self.bookmarks),
            dark_mode=self.dark_mode,
        )

    def has_candidate(self, candidate_id: str) -> bool:
        return any(c.id == candidate_id for c in self.candidates)


_sessions: dict[str, BrowseSession] = {}
_sessions_lock = threading.Lock()


def _now() -> datetime:
    return datetime.now(timezone.utc)


def open_session(raw_key: str) -> BrowseSession:
    """Validate and redeem *raw_key*, registering a new session.

    Raises ``InvalidAccessKey`` for a malformed key and
    ``AccessKeyNotFound`` when the key unlocks nothing.
    """
    access_key = validate_access_key(raw_key)
    resolved = resolve_roster(access_key, load_roster())

    if not resolved.found or not resolved.candidates:
        logger.info("access_key_rejected", extra={"reason": "not_provisioned"})
        raise AccessKeyNotFound(access_key)

    session = BrowseSession(
        session_id=uuid4().hex,
        access_key=resolved.access_key,
        description=resolved.description or "",
        candidates=resolved.candidates,
        dark_mode=settings.DEFAULT_DARK_MODE,
    )
    with _sessions_lock:
        _sessions[session.session_id] = session

    logger.info(
        "session_opened",
        extra={
            "session_id": session.session_id,
            "access_key": session.access_key,
            "unlocked": len(session.candidates),
        },
    )
    return session


def get_session(session_id: str) -> BrowseSession:
    """Return the session and refresh its idle timer."""
    with _sessions_lock:
        session = _sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        session.last_seen = _now()
        return session


def close_session(session_id: str) -> None:
    """Forget the session: key, roster and bookmarks are all cleared."""
    with _sessions_lock:
        session = _sessions.pop(session_id, None)
    if session is None:
        raise SessionNotFound(session_id)
    session.bookmarks.clear()
    logger.info("session_closed", extra={"session_id": session_id})


def browse(
    session_id: str,
    search: str = "",
    domain: str | None = None,
    sort_by: SortKey = SortKey.name,
    view_mode: ViewMode = ViewMode.grid,
) -> RosterPage:
    """Store the filter state and return the recomputed display list."""
    session = get_session(session_id)
    filters = FilterState(
        search=search, domain=domain, sort_by=sort_by, view_mode=view_mode
    )
    with _sessions_lock:
        session.filters = filters
        bookmarked = list(session.bookmarks)

    return RosterPage(
        candidates=filter_candidates(
            session.candidates, search=search, domain=domain, sort_by=sort_by
        ),
        total_unlocked=len(session.candidates),
        domains=available_domains(session.candidates),
        filters=filters,
        bookmarked_ids=bookmarked,
    )


def set_bookmark(session_id: str, candidate_id: str, bookmarked: bool) -> BrowseSession:
    """Mark or unmark an unlocked candidate."""
    session = get_session(session_id)
    if not session.has_candidate(candidate_id):
        raise CandidateNotUnlocked(candidate_id)
    with _sessions_lock:
        if bookmarked:
            session.bookmarks.add(candidate_id)
        else:
            session.bookmarks.remove(candidate_id)
    return session


def bookmarked_candidates(session_id: str) -> tuple[BrowseSession, list[Candidate]]:
    """Return the session and its bookmarked candidates in roster order."""
    session = get_session(session_id)
    with _sessions_lock:
        selected = session.bookmarks.select(session.candidates)
    return session, selected


def set_theme(session_id: str, dark_mode: bool) -> BrowseSession:
    session = get_session(session_id)
    with _sessions_lock:
        session.dark_mode = dark_mode
    return session


def toggle_theme(session_id: str) -> BrowseSession:
    session = get_session(session_id)
    with _sessions_lock:
        session.dark_mode = not session.dark_mode
    return session


def sweep_expired_sessions(now: datetime | None = None) -> int:
    """Drop sessions idle for longer than ``SESSION_TTL_MINUTES``.

    Returns the number of sessions removed.
    """
    cutoff = (now or _now()) - timedelta(minutes=settings.SESSION_TTL_MINUTES)
    with _sessions_lock:
        expired = [sid for sid, s in _sessions.items() if s.last_seen < cutoff]
        for sid in expired:
            del _sessions[sid]

    if expired:
        logger.info("session_swept", extra={"removed": len(expired)})
    return len(expired)


def active_session_count() -> int:
    with _sessions_lock:
        return len(_sessions)


def clear_sessions() -> None:
    """Remove every session (process shutdown)."""
    with _sessions_lock:
        _sessions.clear()
