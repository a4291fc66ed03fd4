"""Unit tests for the record store boundary (schema checks + query shape)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from conftest import chainable_table_mock, make_candidate

STUDENT_ROW = {
    "id": "abc",
    "name": "Sarah Chen",
    "domain": "DS",
    "skills": ["Python"],
    "resume_url": None,
    "linkedin": "https://linkedin.com/in/sarah-chen",
    "github": "https://github.com/sarahchen",
    "ai_summary": "Data scientist.",
    "location": None,
    "graduation_year": 2024,
    "gpa": 3.8,
    "projects": 12,
}

KEY_ROW = {
    "id": "k1",
    "key": "DS2006",
    "domain": "DS",
    "count": 6,
    "description": "Data Science Profiles",
    "is_active": True,
    "created_at": "2025-01-02T10:00:00+00:00",
    "usage_count": 0,
}


class TestCandidates:

    def test_list_orders_by_name_and_validates(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        table = chainable_table_mock([STUDENT_ROW])
        mock_supabase.table.return_value = table

        result = store.list_candidates()

        mock_supabase.table.assert_called_with("students")
        table.order.assert_called_once_with("name")
        assert result[0].id == "abc"
        assert result[0].resume_url == ""
        assert result[0].domain_info.label == "Data Science"

    def test_missing_field_raises_record_shape_error(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        broken = {k: v for k, v in STUDENT_ROW.items() if k != "name"}
        mock_supabase.table.return_value = chainable_table_mock([broken])

        with pytest.raises(store.RecordShapeError) as exc_info:
            store.list_candidates()

        assert exc_info.value.collection == "students"
        assert "name" in exc_info.value.fields

    def test_malformed_field_raises_record_shape_error(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        broken = dict(STUDENT_ROW, gpa="excellent")
        mock_supabase.table.return_value = chainable_table_mock([broken])

        with pytest.raises(store.RecordShapeError) as exc_info:
            store.list_candidates()

        assert exc_info.value.fields == ["gpa"]

    def test_unknown_domain_is_tolerated(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        mock_supabase.table.return_value = chainable_table_mock([dict(STUDENT_ROW, domain="QA")])

        result = store.list_candidates()

        assert result[0].domain == "QA"
        assert result[0].domain_info.label == "QA"
        assert result[0].domain_info.color == "gray"

    def test_remote_failure_raises_store_error(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        table = chainable_table_mock()
        table.execute.side_effect = Exception("network down")
        mock_supabase.table.return_value = table

        with pytest.raises(store.StoreError) as exc_info:
            store.list_candidates()

        assert not isinstance(exc_info.value, store.RecordShapeError)
        assert exc_info.value.action == "list"

    def test_create_candidate_inserts_timestamps(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store
        from recruit.models.candidate import CandidateCreate

        table = chainable_table_mock([STUDENT_ROW])
        mock_supabase.table.return_value = table

        created = store.create_candidate(
            CandidateCreate(name="Sarah Chen", domain="DS", skills="Python, , SQL")
        )

        payload = table.insert.call_args.args[0]
        assert payload["skills"] == ["Python", "SQL"]
        assert "created_at" in payload and "updated_at" in payload
        assert created.id == "abc"

    def test_update_sends_only_set_fields(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store
        from recruit.models.candidate import CandidateUpdate

        table = chainable_table_mock([STUDENT_ROW])
        mock_supabase.table.return_value = table

        store.update_candidate("abc", CandidateUpdate(gpa=3.9))

        payload = table.update.call_args.args[0]
        assert set(payload) == {"gpa", "updated_at"}
        table.eq.assert_called_with("id", "abc")

    def test_update_missing_row_returns_none(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store
        from recruit.models.candidate import CandidateUpdate

        mock_supabase.table.return_value = chainable_table_mock([])

        assert store.update_candidate("nope", CandidateUpdate(gpa=3.0)) is None

    def test_delete_reports_whether_removed(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        mock_supabase.table.return_value = chainable_table_mock([STUDENT_ROW])
        assert store.delete_candidate("abc") is True

        mock_supabase.table.return_value = chainable_table_mock([])
        assert store.delete_candidate("abc") is False


class TestAccessKeys:

    def test_list_newest_first(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        table = chainable_table_mock([KEY_ROW])
        mock_supabase.table.return_value = table

        result = store.list_access_keys()

        mock_supabase.table.assert_called_with("access_keys")
        table.order.assert_called_once_with("created_at", desc=True)
        assert result[0].key == "DS2006"

    def test_negative_count_is_malformed(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        mock_supabase.table.return_value = chainable_table_mock([dict(KEY_ROW, count=-2)])

        with pytest.raises(store.RecordShapeError):
            store.list_access_keys()

    def test_create_sets_active_and_zero_usage(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store
        from recruit.models.access_key import AccessKeyCreate

        table = chainable_table_mock([KEY_ROW])
        mock_supabase.table.return_value = table

        store.create_access_key(
            AccessKeyCreate(key="DS2006", domain="DS", count=6, description="Data Science Profiles")
        )

        payload = table.insert.call_args.args[0]
        assert payload["is_active"] is True
        assert payload["usage_count"] == 0
        assert "created_at" in payload

    def test_create_without_returned_row_is_store_error(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store
        from recruit.models.access_key import AccessKeyCreate

        mock_supabase.table.return_value = chainable_table_mock([])

        with pytest.raises(store.StoreError):
            store.create_access_key(AccessKeyCreate(key="DS2006", description="x"))

    def test_set_active(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        table = chainable_table_mock([dict(KEY_ROW, is_active=False)])
        mock_supabase.table.return_value = table

        record = store.set_access_key_active("k1", False)

        table.update.assert_called_once_with({"is_active": False})
        assert record is not None and record.is_active is False


class TestBookmarks:

    def test_create_denormalizes_name(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        row = {
            "id": "b1",
            "student_id": "c1",
            "student_name": "Sarah Chen",
            "created_at": "2025-01-02T10:00:00+00:00",
            "notes": "",
        }
        table = chainable_table_mock([row])
        mock_supabase.table.return_value = table

        bookmark = store.create_bookmark(make_candidate("c1", "Sarah Chen"))

        payload = table.insert.call_args.args[0]
        assert payload["student_id"] == "c1"
        assert payload["student_name"] == "Sarah Chen"
        assert payload["notes"] == ""
        assert bookmark.id == "b1"

    def test_delete_by_record_id(self, mock_supabase: MagicMock) -> None:
        from recruit.db import store

        table = chainable_table_mock([{"id": "b1"}])
        mock_supabase.table.return_value = table

        assert store.delete_bookmark("b1") is True
        mock_supabase.table.assert_called_with("bookmarks")
        table.eq.assert_called_with("id", "b1")
