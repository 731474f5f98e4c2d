"""
Unit tests for application/queries.py log query construction.
"""
from datetime import datetime, timezone

import pytest

from application.exceptions import InvalidDateError, InvalidNumberError
from application.queries import LogFilter, ResultSpec, build_log_query, resolve_limit

pytestmark = pytest.mark.unit

USER_ID = "6f1c1b6e-7c57-4f4e-9d55-1a1f6b0f5e2a"


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestResolveLimit:
    """Raw limit values become an optional row cap."""

    @pytest.mark.parametrize("raw", [None, "", "0", 0])
    def test_no_cap(self, raw):
        assert resolve_limit(raw) is None

    @pytest.mark.parametrize("raw,expected", [("2", 2), ("10abc", 10), (5, 5), ("-3", 3)])
    def test_cap(self, raw, expected):
        assert resolve_limit(raw) == expected

    def test_unparseable_raises(self):
        with pytest.raises(InvalidNumberError) as exc_info:
            resolve_limit("many")
        assert exc_info.value.message == "Invalid limit"


class TestBuildLogQuery:
    """Raw query parameters become a LogFilter and ResultSpec."""

    def test_defaults(self):
        log_filter, result_spec = build_log_query(USER_ID)
        assert log_filter == LogFilter(user_id=USER_ID)
        assert result_spec == ResultSpec(sort_field="date", ascending=True, limit=None)

    def test_all_parameters(self):
        log_filter, result_spec = build_log_query(
            USER_ID, date_from="2024-01-02", date_to="2024-01-05", limit="2",
        )
        assert log_filter.date_from == _utc(2024, 1, 2)
        assert log_filter.date_to == _utc(2024, 1, 5)
        assert result_spec.limit == 2

    def test_limit_never_touches_filter(self):
        capped, _ = build_log_query(USER_ID, limit="1")
        uncapped, _ = build_log_query(USER_ID)
        assert capped == uncapped

    def test_invalid_from(self):
        with pytest.raises(InvalidDateError) as exc_info:
            build_log_query(USER_ID, date_from="yesterday")
        assert exc_info.value.message == "Invalid from date"

    def test_invalid_to(self):
        with pytest.raises(InvalidDateError) as exc_info:
            build_log_query(USER_ID, date_to="2024-99-99")
        assert exc_info.value.message == "Invalid to date"

    def test_invalid_limit(self):
        with pytest.raises(InvalidNumberError):
            build_log_query(USER_ID, limit="abc")
