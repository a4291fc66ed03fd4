"""Session-scoped bookmark set (access-key flow)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from recruit.models.candidate import Candidate


class BookmarkSet:
    """Ids of candidates marked for export during one browsing session."""

    def __init__(self, ids: Iterable[str] = ()) -> None:
        self._ids: set[str] = set(ids)

    def add(self, candidate_id: str) -> None:
        self._ids.add(candidate_id)

    def remove(self, candidate_id: str) -> None:
        """Unmark *candidate_id*; a no-op if it was not marked."""
        self._ids.discard(candidate_id)

    def toggle(self, candidate_id: str) -> bool:
        """Flip membership and return the new state."""
        if candidate_id in self._ids:
            self._ids.remove(candidate_id)
            return False
        self._ids.add(candidate_id)
        return True

    def clear(self) -> None:
        self._ids.clear()

    @property
    def ids(self) -> frozenset[str]:
        return frozenset(self._ids)

    def select(self, candidates: Iterable[Candidate]) -> list[Candidate]:
        """Return the bookmarked members of *candidates*, in their order."""
        return [c for c in candidates if c.id in self._ids]

    def __contains__(self, candidate_id: object) -> bool:
        return candidate_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._ids))
