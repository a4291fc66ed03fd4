"""Request / response models for the access-key browsing flow."""

from pydantic import BaseModel

from recruit.models.candidate import Candidate
from recruit.models.enums import SortKey, ViewMode
from recruit.models.notification import Notification


class RedeemRequest(BaseModel):
    """Body for ``POST /sessions``."""
    access_key: str


class ThemeRequest(BaseModel):
    """Body for ``PUT /sessions/{id}/theme``."""
    dark_mode: bool


class FilterState(BaseModel):
    """Current search / domain / sort / view selection of a session."""
    search: str = ""
    domain: str | None = None
    sort_by: SortKey = SortKey.name
    view_mode: ViewMode = ViewMode.grid


class SessionSummary(BaseModel):
    """Snapshot of a browsing session."""
    session_id: str
    access_key: str
    description: str
    total_unlocked: int
    bookmarked_count: int
    bookmarked_ids: list[str] = []
    dark_mode: bool = False
    notification: Notification | None = None


class RosterPage(BaseModel):
    """Filtered, sorted candidates of a session plus the filter echo."""
    candidates: list[Candidate] = []
    total_unlocked: int = 0
    domains: list[str] = []
    filters: FilterState = FilterState()
    bookmarked_ids: list[str] = []


class BookmarkChange(BaseModel):
    """Result of bookmarking / unbookmarking a candidate."""
    candidate_id: str
    bookmarked: bool
    bookmarked_count: int
    notification: Notification


class ExportNotice(BaseModel):
    """Returned instead of a file when there is nothing to export."""
    exported_count: int = 0
    notification: Notification
