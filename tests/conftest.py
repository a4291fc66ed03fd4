"""Shared test fixtures.

Provides env defaults for ``Settings``, a FastAPI ``test_client``, a mock
Supabase client wired into the record store, candidate factories, and
per-test isolation of the in-memory session registry.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock, patch

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402


def chainable_table_mock(data: list[dict[str, Any]] | None = None) -> MagicMock:
    """Return a table mock that supports fluent chaining."""
    m = MagicMock()
    for method in ("select", "insert", "update", "delete", "eq", "limit", "order"):
        getattr(m, method).return_value = m
    m.execute.return_value = MagicMock(data=data if data is not None else [])
    return m


def make_candidate(
    candidate_id: str,
    name: str,
    domain: str = "DS",
    skills: list[str] | None = None,
    gpa: float | None = None,
    graduation_year: int | None = None,
    ai_summary: str = "",
    location: str | None = None,
) -> Any:
    """Build a validated ``Candidate`` with sensible link defaults."""
    from recruit.models.candidate import Candidate

    slug = name.lower().replace(" ", "-")
    return Candidate(
        id=candidate_id,
        name=name,
        domain=domain,
        skills=skills or [],
        linkedin=f"https://linkedin.com/in/{slug}",
        github=f"https://github.com/{slug}",
        ai_summary=ai_summary,
        location=location,
        gpa=gpa,
        graduation_year=graduation_year,
    )


@pytest.fixture(autouse=True)
def _isolated_sessions() -> Generator[None, None, None]:
    """Every test starts and ends with an empty session registry."""
    from recruit.services.sessions import clear_sessions

    clear_sessions()
    yield
    clear_sessions()


@pytest.fixture()
def mock_supabase() -> Generator[MagicMock, None, None]:
    """Patch the store's ``get_supabase`` to return a mock Supabase client."""
    mock_client = MagicMock()
    with patch("recruit.db.store.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_module() -> Generator[MagicMock, None, None]:
    """Patch the Supabase client at module level in the health router."""
    mock_client = MagicMock()
    mock_client.table.return_value = chainable_table_mock()

    with patch("recruit.routers.health.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_disconnected() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` to simulate a disconnected database."""
    with patch(
        "recruit.routers.health.get_supabase",
        side_effect=Exception("Connection refused"),
    ):
        yield MagicMock()


@pytest.fixture()
def roster() -> list[Any]:
    """A small mixed-domain candidate pool."""
    return [
        make_candidate("c1", "Sarah Chen", "DS", ["Python", "SQL"], 3.8, 2024,
                       "Built predictive models."),
        make_candidate("c2", "Alex Rodriguez", "WD", ["React", "TypeScript"], 3.9, 2023,
                       "Full-stack developer."),
        make_candidate("c3", "Emma Thompson", "DS", ["R", "Tableau"], None, 2025,
                       "Analytics specialist."),
        make_candidate("c4", "David Kim", "BE", ["Java", "Redis"], 3.75, None,
                       "Backend engineer."),
    ]


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient."""
    from recruit.main import app

    with TestClient(app) as client:
        yield client
