"""Pydantic models for the persisted ``bookmarks`` collection (HR flow)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BookmarkCreate(BaseModel):
    """Request body for bookmarking a candidate."""
    student_id: str
    notes: str = ""


class Bookmark(BaseModel):
    """Full bookmark record returned from the store."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    student_id: str
    student_name: str
    created_at: datetime
    notes: str | None = None
