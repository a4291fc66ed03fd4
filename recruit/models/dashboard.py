"""Response models for the admin and HR dashboards.

These are API-layer response schemas, not direct table mappings.
"""

from pydantic import BaseModel

from recruit.models.access_key import AccessKeyRecord
from recruit.models.bookmark import Bookmark
from recruit.models.candidate import Candidate
from recruit.models.notification import Notification


# --- Admin ---

class AdminStats(BaseModel):
    """Counters shown at the top of the admin screen."""
    total_students: int = 0
    active_keys: int = 0
    total_keys: int = 0
    domains: int = 0


class AdminOverview(BaseModel):
    """Full response for GET /api/v1/admin/overview."""
    stats: AdminStats = AdminStats()
    candidates: list[Candidate] = []
    access_keys: list[AccessKeyRecord] = []


# --- HR ---

class HRStats(BaseModel):
    """Counters shown at the top of the HR screen."""
    total_profiles: int = 0
    bookmarked: int = 0
    domains: int = 0
    average_gpa: str = "0.0"


class BookmarkedCandidate(BaseModel):
    """A persisted bookmark joined to its candidate (if still present)."""
    bookmark: Bookmark
    candidate: Candidate | None = None


class HROverview(BaseModel):
    """Full response for GET /api/v1/hr/overview."""
    stats: HRStats = HRStats()
    domains: list[str] = []


class BookmarkList(BaseModel):
    """Refreshed bookmark collection after a read or mutation.

    ``refreshed`` is False when a mutation was saved but the re-read that
    follows it failed; ``bookmarks`` is then empty and should be reloaded.
    """
    bookmarks: list[BookmarkedCandidate] = []
    total: int = 0
    refreshed: bool = True
    notification: Notification | None = None
