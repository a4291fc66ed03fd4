"""Admin workflows: candidate and access-key management.

Thin validation on top of ``recruit.db.store``.  The ``access_keys``
collection managed here is separate from the static table the access-key
flow redeems against.
"""

from __future__ import annotations

import logging

from recruit.core.constants import MSG_ACCESS_KEY_REQUIRED, MSG_CANDIDATE_REQUIRED
from recruit.db import store
from recruit.models.access_key import AccessKeyCreate, AccessKeyRecord
from recruit.models.candidate import Candidate, CandidateCreate, CandidateUpdate
from recruit.models.dashboard import AdminOverview, AdminStats

logger = logging.getLogger(__name__)


class AdminInputError(ValueError):
    """Required admin form fields are missing."""


class DuplicateAccessKey(ValueError):
    """An access key record with the same key already exists."""


def compute_stats(
    candidates: list[Candidate], access_keys: list[AccessKeyRecord]
) -> AdminStats:
    return AdminStats(
        total_students=len(candidates),
        active_keys=sum(1 for k in access_keys if k.is_active),
        total_keys=len(access_keys),
        domains=len({c.domain for c in candidates}),
    )


def get_overview() -> AdminOverview:
    """Load both collections and the dashboard counters."""
    candidates = store.list_candidates()
    access_keys = store.list_access_keys()
    return AdminOverview(
        stats=compute_stats(candidates, access_keys),
        candidates=candidates,
        access_keys=access_keys,
    )


def add_candidate(payload: CandidateCreate) -> Candidate:
    if not payload.name.strip() or not payload.domain.strip():
        raise AdminInputError(MSG_CANDIDATE_REQUIRED)
    candidate = store.create_candidate(payload)
    logger.info("candidate_created", extra={"candidate_id": candidate.id})
    return candidate


def edit_candidate(candidate_id: str, payload: CandidateUpdate) -> Candidate | None:
    if payload.name is not None and not payload.name.strip():
        raise AdminInputError(MSG_CANDIDATE_REQUIRED)
    if payload.domain is not None and not payload.domain.strip():
        raise AdminInputError(MSG_CANDIDATE_REQUIRED)
    return store.update_candidate(candidate_id, payload)


def remove_candidate(candidate_id: str) -> bool:
    removed = store.delete_candidate(candidate_id)
    if removed:
        logger.info("candidate_deleted", extra={"candidate_id": candidate_id})
    return removed


def add_access_key(payload: AccessKeyCreate) -> AccessKeyRecord:
    """Create an access key record; key strings must be unique."""
    key = payload.key.strip()
    if not key or not payload.description.strip():
        raise AdminInputError(MSG_ACCESS_KEY_REQUIRED)

    existing = {k.key for k in store.list_access_keys()}
    if key in existing:
        raise DuplicateAccessKey(f"Access key {key} already exists")

    record = store.create_access_key(payload.model_copy(update={"key": key}))
    logger.info("access_key_created", extra={"key_id": record.id})
    return record


def toggle_access_key(key_id: str, is_active: bool) -> AccessKeyRecord | None:
    record = store.set_access_key_active(key_id, is_active)
    if record is not None:
        logger.info(
            "access_key_toggled",
            extra={"key_id": key_id, "is_active": is_active},
        )
    return record


def remove_access_key(key_id: str) -> bool:
    return store.delete_access_key(key_id)
