"""Admin dashboard endpoints: candidate and access-key CRUD."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from recruit.db import store
from recruit.db.store import StoreError
from recruit.models.access_key import AccessKeyCreate, AccessKeyRecord, AccessKeyUpdate
from recruit.models.candidate import Candidate, CandidateCreate, CandidateUpdate
from recruit.models.dashboard import AdminOverview
from recruit.routers.downloads import store_failure
from recruit.services import admin

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/overview", response_model=AdminOverview)
async def admin_overview() -> AdminOverview:
    """Counters plus both collections (candidates by name, keys newest first)."""
    try:
        return admin.get_overview()
    except StoreError as exc:
        raise store_failure(exc, "admin_overview_failed") from exc


# ---------------------------------------------------------------------------
# Candidates
# ---------------------------------------------------------------------------

@router.get("/candidates", response_model=list[Candidate])
async def list_candidates() -> list[Candidate]:
    try:
        return store.list_candidates()
    except StoreError as exc:
        raise store_failure(exc, "admin_list_candidates_failed") from exc


@router.post("/candidates", status_code=201, response_model=Candidate)
async def create_candidate(body: CandidateCreate) -> Candidate:
    try:
        return admin.add_candidate(body)
    except admin.AdminInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except StoreError as exc:
        raise store_failure(exc, "create_candidate_failed") from exc


@router.put("/candidates/{candidate_id}", response_model=Candidate)
async def update_candidate(candidate_id: str, body: CandidateUpdate) -> Candidate:
    try:
        candidate = admin.edit_candidate(candidate_id, body)
    except admin.AdminInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except StoreError as exc:
        raise store_failure(exc, "update_candidate_failed") from exc

    if candidate is None:
        raise HTTPException(status_code=404, detail="Candidate not found")
    return candidate


@router.delete("/candidates/{candidate_id}", status_code=204)
async def delete_candidate(candidate_id: str) -> None:
    try:
        removed = admin.remove_candidate(candidate_id)
    except StoreError as exc:
        raise store_failure(exc, "delete_candidate_failed") from exc

    if not removed:
        raise HTTPException(status_code=404, detail="Candidate not found")


# ---------------------------------------------------------------------------
# Access keys
# ---------------------------------------------------------------------------

@router.get("/access-keys", response_model=list[AccessKeyRecord])
async def list_access_keys() -> list[AccessKeyRecord]:
    try:
        return store.list_access_keys()
    except StoreError as exc:
        raise store_failure(exc, "admin_list_access_keys_failed") from exc


@router.post("/access-keys", status_code=201, response_model=AccessKeyRecord)
async def create_access_key(body: AccessKeyCreate) -> AccessKeyRecord:
    try:
        return admin.add_access_key(body)
    except admin.AdminInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except admin.DuplicateAccessKey as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except StoreError as exc:
        raise store_failure(exc, "create_access_key_failed") from exc


@router.patch("/access-keys/{key_id}", response_model=AccessKeyRecord)
async def update_access_key(key_id: str, body: AccessKeyUpdate) -> AccessKeyRecord:
    """Activate or deactivate an access key."""
    try:
        record = admin.toggle_access_key(key_id, body.is_active)
    except StoreError as exc:
        raise store_failure(exc, "update_access_key_failed") from exc

    if record is None:
        raise HTTPException(status_code=404, detail="Access key not found")
    return record


@router.delete("/access-keys/{key_id}", status_code=204)
async def delete_access_key(key_id: str) -> None:
    try:
        removed = admin.remove_access_key(key_id)
    except StoreError as exc:
        raise store_failure(exc, "delete_access_key_failed") from exc

    if not removed:
        raise HTTPException(status_code=404, detail="Access key not found")
