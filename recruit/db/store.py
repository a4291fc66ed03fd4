"""Record store boundary over the Supabase ``students``, ``access_keys`` and
``bookmarks`` collections.

Every row read back is validated into its pydantic model.  A row that does
not fit raises ``RecordShapeError``; any other failure of a remote call
raises ``StoreError`` with the original exception chained.  No retries: the
caller reports the failure and the user retries from the UI.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from recruit.core.constants import ACCESS_KEYS_TABLE, BOOKMARKS_TABLE, STUDENTS_TABLE
from recruit.db.supabase import get_supabase
from recruit.models.access_key import AccessKeyCreate, AccessKeyRecord
from recruit.models.bookmark import Bookmark
from recruit.models.candidate import Candidate, CandidateCreate, CandidateUpdate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class StoreError(RuntimeError):
    """A remote record store call failed."""

    def __init__(self, collection: str, action: str, message: str) -> None:
        super().__init__(f"{action} on {collection} failed: {message}")
        self.collection = collection
        self.action = action


class RecordShapeError(StoreError):
    """A stored row is missing fields or has malformed ones."""

    def __init__(self, collection: str, fields: list[str], message: str) -> None:
        super().__init__(collection, "validate", message)
        self.fields = fields


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _execute(query: Any, collection: str, action: str) -> list[dict[str, Any]]:
    """Run a PostgREST query and return its rows, wrapping failures."""
    try:
        result = query.execute()
    except Exception as exc:
        logger.error(
            "store_call_failed",
            extra={
                "collection": collection,
                "action": action,
                "error_message": str(exc),
            },
        )
        raise StoreError(collection, action, str(exc)) from exc
    return result.data or []


def _validate(model: type[ModelT], row: dict[str, Any], collection: str) -> ModelT:
    """Validate a raw row into *model* or raise ``RecordShapeError``."""
    try:
        return model.model_validate(row)
    except ValidationError as exc:
        fields = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
        logger.warning(
            "store_record_malformed",
            extra={
                "collection": collection,
                "record_id": row.get("id"),
                "fields": fields,
            },
        )
        raise RecordShapeError(collection, fields, str(exc)) from exc


def _validate_all(
    model: type[ModelT], rows: list[dict[str, Any]], collection: str
) -> list[ModelT]:
    return [_validate(model, row, collection) for row in rows]


def _first(rows: list[dict[str, Any]], collection: str, action: str) -> dict[str, Any]:
    if not rows:
        raise StoreError(collection, action, "no row returned")
    return rows[0]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ---------------------------------------------------------------------------
# Candidates (``students``)
# ---------------------------------------------------------------------------

def list_candidates() -> list[Candidate]:
    """Return every candidate ordered by name."""
    client = get_supabase()
    rows = _execute(
        client.table(STUDENTS_TABLE).select("*").order("name"),
        STUDENTS_TABLE,
        "list",
    )
    return _validate_all(Candidate, rows, STUDENTS_TABLE)


def create_candidate(payload: CandidateCreate) -> Candidate:
    """Insert a candidate and return the stored record."""
    client = get_supabase()
    now = _now_iso()
    data = payload.model_dump()
    data["created_at"] = now
    data["updated_at"] = now
    rows = _execute(
        client.table(STUDENTS_TABLE).insert(data),
        STUDENTS_TABLE,
        "create",
    )
    return _validate(Candidate, _first(rows, STUDENTS_TABLE, "create"), STUDENTS_TABLE)


def update_candidate(candidate_id: str, payload: CandidateUpdate) -> Candidate | None:
    """Patch a candidate by id.  Returns ``None`` when no row matched."""
    client = get_supabase()
    data = payload.model_dump(exclude_unset=True)
    data["updated_at"] = _now_iso()
    rows = _execute(
        client.table(STUDENTS_TABLE).update(data).eq("id", candidate_id),
        STUDENTS_TABLE,
        "update",
    )
    if not rows:
        return None
    return _validate(Candidate, rows[0], STUDENTS_TABLE)


def delete_candidate(candidate_id: str) -> bool:
    """Delete a candidate by id.  Returns whether a row was removed."""
    client = get_supabase()
    rows = _execute(
        client.table(STUDENTS_TABLE).delete().eq("id", candidate_id),
        STUDENTS_TABLE,
        "delete",
    )
    return bool(rows)


# ---------------------------------------------------------------------------
# Access keys
# ---------------------------------------------------------------------------

def list_access_keys() -> list[AccessKeyRecord]:
    """Return every access key record, newest first."""
    client = get_supabase()
    rows = _execute(
        client.table(ACCESS_KEYS_TABLE).select("*").order("created_at", desc=True),
        ACCESS_KEYS_TABLE,
        "list",
    )
    return _validate_all(AccessKeyRecord, rows, ACCESS_KEYS_TABLE)


def create_access_key(payload: AccessKeyCreate) -> AccessKeyRecord:
    """Insert an active access key with a zero usage counter."""
    client = get_supabase()
    data = payload.model_dump()
    data.update({"is_active": True, "usage_count": 0, "created_at": _now_iso()})
    rows = _execute(
        client.table(ACCESS_KEYS_TABLE).insert(data),
        ACCESS_KEYS_TABLE,
        "create",
    )
    return _validate(
        AccessKeyRecord, _first(rows, ACCESS_KEYS_TABLE, "create"), ACCESS_KEYS_TABLE
    )


def set_access_key_active(key_id: str, is_active: bool) -> AccessKeyRecord | None:
    """Activate or deactivate an access key.  ``None`` when no row matched."""
    client = get_supabase()
    rows = _execute(
        client.table(ACCESS_KEYS_TABLE).update({"is_active": is_active}).eq("id", key_id),
        ACCESS_KEYS_TABLE,
        "update",
    )
    if not rows:
        return None
    return _validate(AccessKeyRecord, rows[0], ACCESS_KEYS_TABLE)


def delete_access_key(key_id: str) -> bool:
    """Delete an access key by id.  Returns whether a row was removed."""
    client = get_supabase()
    rows = _execute(
        client.table(ACCESS_KEYS_TABLE).delete().eq("id", key_id),
        ACCESS_KEYS_TABLE,
        "delete",
    )
    return bool(rows)


# ---------------------------------------------------------------------------
# Bookmarks (HR flow)
# ---------------------------------------------------------------------------

def list_bookmarks() -> list[Bookmark]:
    """Return the whole bookmark collection (not scoped per user)."""
    client = get_supabase()
    rows = _execute(
        client.table(BOOKMARKS_TABLE).select("*"),
        BOOKMARKS_TABLE,
        "list",
    )
    return _validate_all(Bookmark, rows, BOOKMARKS_TABLE)


def create_bookmark(candidate: Candidate, notes: str = "") -> Bookmark:
    """Persist a bookmark for *candidate* with its name denormalized."""
    client = get_supabase()
    data = {
        "student_id": candidate.id,
        "student_name": candidate.name,
        "created_at": _now_iso(),
        "notes": notes,
    }
    rows = _execute(
        client.table(BOOKMARKS_TABLE).insert(data),
        BOOKMARKS_TABLE,
        "create",
    )
    return _validate(Bookmark, _first(rows, BOOKMARKS_TABLE, "create"), BOOKMARKS_TABLE)


def delete_bookmark(bookmark_id: str) -> bool:
    """Delete a bookmark by record id.  Returns whether a row was removed."""
    client = get_supabase()
    rows = _execute(
        client.table(BOOKMARKS_TABLE).delete().eq("id", bookmark_id),
        BOOKMARKS_TABLE,
        "delete",
    )
    return bool(rows)
