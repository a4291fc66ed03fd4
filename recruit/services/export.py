"""CSV export of candidate lists.

Layout: header ``Name,Domain,Location,GPA,Skills,LinkedIn,GitHub,Summary``,
every field double-quoted, skills joined with ``"; "``, rows separated by
``\\n``.  Embedded double quotes are written unescaped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from recruit.core.constants import EXPORT_HEADER, SKILLS_SEPARATOR
from recruit.models.candidate import Candidate

logger = logging.getLogger(__name__)


class NothingToExport(Exception):
    """Raised when the candidate list to export is empty."""


@dataclass
class ExportResult:
    """A ready-to-download CSV document."""
    filename: str
    content: str
    count: int


def _format_gpa(gpa: float | None) -> str:
    # 0 and missing both render empty; 4.0 renders as "4"
    return f"{gpa:g}" if gpa else ""


def candidate_row(candidate: Candidate) -> list[str]:
    """Return the eight export fields of *candidate*."""
    return [
        candidate.name,
        candidate.domain,
        candidate.location or "",
        _format_gpa(candidate.gpa),
        SKILLS_SEPARATOR.join(candidate.skills),
        candidate.linkedin,
        candidate.github,
        candidate.ai_summary,
    ]


def build_csv(candidates: list[Candidate]) -> str:
    """Serialize *candidates* to the export CSV layout (header first).

    Fields are wrapped in double quotes as-is; quotes inside a value are not
    doubled, so such a row does not round-trip through a CSV reader.
    """
    lines = [",".join(EXPORT_HEADER)]
    lines.extend(
        ",".join(f'"{value}"' for value in candidate_row(c)) for c in candidates
    )
    return "\n".join(lines)


def export_filename(
    prefix: str,
    access_key: str | None = None,
    today: date | None = None,
) -> str:
    """``<prefix>-<KEY>.csv`` when a key is given, else ``<prefix>-<YYYY-MM-DD>.csv``."""
    suffix = access_key or (today or date.today()).isoformat()
    return f"{prefix}-{suffix}.csv"


def export_candidates(
    candidates: list[Candidate],
    prefix: str,
    access_key: str | None = None,
    today: date | None = None,
) -> ExportResult:
    """Build the export document or raise ``NothingToExport``."""
    if not candidates:
        raise NothingToExport()

    result = ExportResult(
        filename=export_filename(prefix, access_key=access_key, today=today),
        content=build_csv(candidates),
        count=len(candidates),
    )
    logger.info(
        "export_built",
        extra={"export_filename": result.filename, "count": result.count},
    )
    return result
