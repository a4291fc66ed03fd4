"""Pydantic models for the ``students`` collection.

``Candidate`` is the validated shape of a stored row; the create / update
payloads are what the admin screen submits.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from recruit.models.domain import DomainDisplay, domain_display


def parse_skills(value: Any) -> list[str]:
    """Accept a list or a comma-separated string and return clean skills."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(s).strip() for s in value if str(s).strip()]


class CandidateCreate(BaseModel):
    """Payload for creating a candidate (insert)."""
    name: str = ""
    domain: str = "DS"
    skills: list[str] = []
    location: str | None = None
    graduation_year: int | None = None
    gpa: float | None = None
    projects: int | None = None
    ai_summary: str = ""
    linkedin: str = ""
    github: str = ""
    resume_url: str = ""

    @field_validator("skills", mode="before")
    @classmethod
    def _clean_skills(cls, value: Any) -> list[str]:
        return parse_skills(value)


class CandidateUpdate(BaseModel):
    """Partial update for an existing candidate."""
    name: str | None = None
    domain: str | None = None
    skills: list[str] | None = None
    location: str | None = None
    graduation_year: int | None = None
    gpa: float | None = None
    projects: int | None = None
    ai_summary: str | None = None
    linkedin: str | None = None
    github: str | None = None
    resume_url: str | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def _clean_skills(cls, value: Any) -> list[str] | None:
        return None if value is None else parse_skills(value)


class Candidate(BaseModel):
    """Full candidate record returned from the store."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    domain: str
    skills: list[str] = Field(default_factory=list)
    resume_url: str = ""
    linkedin: str = ""
    github: str = ""
    ai_summary: str = ""
    location: str | None = None
    graduation_year: int | None = None
    gpa: float | None = None
    projects: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def _none_skills(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("resume_url", "linkedin", "github", "ai_summary", mode="before")
    @classmethod
    def _none_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def domain_info(self) -> DomainDisplay:
        """Label and color for ``domain`` (unknown codes fall back)."""
        return domain_display(self.domain)
