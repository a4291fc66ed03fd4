"""Application constants.

Contains the access-key configuration table, collection names, export
layout, and user-facing messages.
"""

# ---------------------------------------------------------------------------
# Access keys
# Two uppercase letters (domain) followed by four digits, e.g. DS2006.
# ---------------------------------------------------------------------------
ACCESS_KEY_PATTERN: str = r"^[A-Z]{2}\d{4}$"

# Static redemption table consulted by the home flow.  The admin-managed
# ``access_keys`` collection is NOT read here.
ACCESS_KEY_CONFIGS: dict[str, dict[str, str | int]] = {
    "DS2006": {
        "domain": "DS",
        "count": 6,
        "description": "Data Science Profiles",
    },
    "WD1010": {
        "domain": "WD",
        "count": 10,
        "description": "Web Development Profiles",
    },
    "ML0504": {
        "domain": "ML",
        "count": 4,
        "description": "Machine Learning Profiles",
    },
    "UI0805": {
        "domain": "UI",
        "count": 5,
        "description": "UI/UX Design Profiles",
    },
    "BE0708": {
        "domain": "BE",
        "count": 8,
        "description": "Backend Engineering Profiles",
    },
}

# ---------------------------------------------------------------------------
# Record store collections
# ---------------------------------------------------------------------------
STUDENTS_TABLE: str = "students"
ACCESS_KEYS_TABLE: str = "access_keys"
BOOKMARKS_TABLE: str = "bookmarks"

# ---------------------------------------------------------------------------
# CSV export
# ---------------------------------------------------------------------------
EXPORT_HEADER: list[str] = [
    "Name", "Domain", "Location", "GPA", "Skills", "LinkedIn", "GitHub", "Summary",
]
SKILLS_SEPARATOR: str = "; "

# ---------------------------------------------------------------------------
# User-facing messages
# ---------------------------------------------------------------------------
MSG_INVALID_KEY_FORMAT: str = "Please enter a valid access key (format: AB1234)"
MSG_KEY_NOT_FOUND: str = "The access key you entered is not valid or has expired."
MSG_NO_SESSION_BOOKMARKS: str = "Please bookmark some profiles first."
MSG_NO_HR_BOOKMARKS: str = "You don't have any bookmarked profiles to export."
MSG_MISSING_CREDENTIALS: str = "Please fill in all required fields."
MSG_PASSWORD_MISMATCH: str = "Passwords do not match."
MSG_CANDIDATE_REQUIRED: str = "Name and domain are required"
MSG_ACCESS_KEY_REQUIRED: str = "Key and description are required"

AUTH_ERROR_MESSAGES: dict[str, str] = {
    "invalid_email": "Invalid email address.",
    "user_disabled": "This account has been disabled.",
    "user_not_found": "No account found with this email.",
    "wrong_password": "Incorrect password.",
    "email_already_in_use": "An account with this email already exists.",
    "weak_password": "Password should be at least 6 characters.",
    "invalid_credential": "Invalid email or password.",
}
AUTH_GENERIC_MESSAGE: str = "An error occurred. Please try again."

# Supabase auth error codes -> normalized codes above
SUPABASE_AUTH_CODES: dict[str, str] = {
    "email_address_invalid": "invalid_email",
    "validation_failed": "invalid_email",
    "user_banned": "user_disabled",
    "user_not_found": "user_not_found",
    "email_exists": "email_already_in_use",
    "user_already_exists": "email_already_in_use",
    "weak_password": "weak_password",
    "invalid_credentials": "invalid_credential",
}
