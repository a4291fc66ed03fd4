"""Candidate pool loading and the filter/sort engine.

``filter_candidates`` is a pure function: it never mutates its input and
always returns a new list, so repeated calls with the same arguments give
the same result.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Callable

from recruit.core.config import settings
from recruit.core.seed import SEED_ROSTER
from recruit.db import store
from recruit.models.candidate import Candidate
from recruit.models.enums import SortKey

logger = logging.getLogger(__name__)

ALL_DOMAINS = "all"


def load_roster() -> list[Candidate]:
    """Return the candidate pool redeemable through access keys.

    ``ROSTER_SOURCE=static`` uses the built-in roster; ``store`` reads the
    ``students`` collection (ordered by name).
    """
    if settings.ROSTER_SOURCE == "store":
        return store.list_candidates()
    return [Candidate.model_validate(row) for row in SEED_ROSTER]


def _collation_key(text: str) -> str:
    """Casefold and strip accents so "Émile" sorts next to "Emile"."""
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def matches_search(candidate: Candidate, search: str) -> bool:
    """Case-insensitive substring match on name, any skill, or summary."""
    needle = search.lower()
    return (
        needle in candidate.name.lower()
        or any(needle in skill.lower() for skill in candidate.skills)
        or needle in candidate.ai_summary.lower()
    )


_SORTS: dict[SortKey, tuple[Callable[[Candidate], object], bool]] = {
    SortKey.name: (lambda c: (_collation_key(c.name), c.name), False),
    SortKey.domain: (lambda c: c.domain, False),
    SortKey.gpa: (lambda c: c.gpa or 0, True),
    SortKey.recent: (lambda c: c.graduation_year or 0, True),
}


def filter_candidates(
    candidates: list[Candidate],
    search: str = "",
    domain: str | None = None,
    sort_by: SortKey | str = SortKey.name,
) -> list[Candidate]:
    """Search, domain-filter, then stable-sort *candidates*.

    Parameters
    ----------
    candidates:
        Pool to derive the display list from (left untouched).
    search:
        Free text; empty keeps everything.
    domain:
        Exact domain code, or ``None`` / ``""`` / ``"all"`` for no filter.
    sort_by:
        ``name`` and ``domain`` ascending; ``gpa`` and ``recent`` descending
        with missing values counted as 0.
    """
    result = list(candidates)

    if search:
        result = [c for c in result if matches_search(c, search)]

    if domain and domain != ALL_DOMAINS:
        result = [c for c in result if c.domain == domain]

    key, descending = _SORTS[SortKey(sort_by)]
    # sorted() stays stable with reverse=True
    return sorted(result, key=key, reverse=descending)


def available_domains(candidates: list[Candidate]) -> list[str]:
    """Distinct domain codes in first-seen order (domain filter choices)."""
    return list(dict.fromkeys(c.domain for c in candidates))
