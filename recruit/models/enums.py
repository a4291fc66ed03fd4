"""Enum types shared by models, services and routers."""

from enum import Enum


class Domain(str, Enum):
    """Candidate specialty.  ``OTHER`` absorbs codes outside the known set."""
    DS = "DS"
    WD = "WD"
    ML = "ML"
    UI = "UI"
    BE = "BE"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, code: str | None) -> "Domain":
        """Return the member for *code*, falling back to ``OTHER``."""
        try:
            return cls((code or "").strip().upper())
        except ValueError:
            return cls.OTHER


class SortKey(str, Enum):
    """Ordering applied by the filter/sort engine."""
    name = "name"
    domain = "domain"
    gpa = "gpa"
    recent = "recent"


class ViewMode(str, Enum):
    """Roster presentation mode."""
    grid = "grid"
    list = "list"


class UserRole(str, Enum):
    """Screen a signed-in user is routed to."""
    admin = "admin"
    hr = "hr"


class NotificationVariant(str, Enum):
    """Severity of a user-facing notification."""
    default = "default"
    destructive = "destructive"


class AuthErrorCode(str, Enum):
    """Normalized auth failure codes."""
    invalid_email = "invalid_email"
    user_disabled = "user_disabled"
    user_not_found = "user_not_found"
    wrong_password = "wrong_password"
    email_already_in_use = "email_already_in_use"
    weak_password = "weak_password"
    invalid_credential = "invalid_credential"
    unknown = "unknown"
