"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Supabase (record store + auth)
    SUPABASE_URL: str
    SUPABASE_KEY: str

    # Roster used by the access-key flow
    ROSTER_SOURCE: Literal["static", "store"] = "static"

    # Browsing sessions
    SESSION_TTL_MINUTES: int = 60
    SESSION_SWEEP_INTERVAL_MINUTES: int = 10
    DEFAULT_DARK_MODE: bool = False

    # Auth routing
    ADMIN_EMAIL_MARKERS: str = "admin,smarted"

    # Export
    EXPORT_FILENAME_PREFIX: str = "smarted-bookmarked-profiles"
    HR_EXPORT_FILENAME_PREFIX: str = "hr-bookmarked-profiles"

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def admin_email_markers(self) -> list[str]:
        """Return the non-empty admin email markers, case preserved."""
        return [m.strip() for m in self.ADMIN_EMAIL_MARKERS.split(",") if m.strip()]


settings = Settings()  # type: ignore[call-arg]
