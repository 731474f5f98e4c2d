"""
Supabase Exercise Repository Implementation.

This module implements the ExerciseRepository protocol using Supabase as the
backend. LogFilter / ResultSpec values are translated into PostgREST filters
(``eq``/``gte``/``lte``), ordering and paged ``range`` reads.

Expected table (default name ``exercises``)::

    create table exercises (
        id uuid primary key default gen_random_uuid(),
        user_id uuid not null,
        description text not null,
        duration integer not null,
        date timestamptz not null default now()
    );
    create index exercises_user_id_date_idx on exercises (user_id, date);
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from supabase import Client

from application.exceptions import PersistenceError
from application.queries import LogFilter, ResultSpec
from domain.models import Exercise

logger = logging.getLogger(__name__)

# Columns returned by log reads
LOG_COLUMNS = "description, duration, date"

# PostgREST's default max-rows; reads page in windows of this size
PAGE_SIZE = 1000


def _parse_timestamp(value: Any) -> datetime:
    """Parse a timestamptz value returned by PostgREST."""
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _row_to_exercise(row: Dict[str, Any]) -> Exercise:
    return Exercise(
        id=str(row["id"]) if row.get("id") is not None else None,
        user_id=str(row["user_id"]) if row.get("user_id") is not None else None,
        description=str(row["description"]),
        duration=int(row["duration"]),
        date=_parse_timestamp(row["date"]),
    )


class SupabaseExerciseRepository:
    """
    Supabase implementation of ExerciseRepository protocol.

    Store errors are logged and re-raised as PersistenceError.
    """

    def __init__(self, client: Client, table: str = "exercises", page_size: int = PAGE_SIZE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the exercises table
            page_size: Rows requested per round trip on reads
        """
        self._client = client
        self._table = table
        self._page_size = page_size

    def _apply_filter(self, query, log_filter: LogFilter):
        query = query.eq("user_id", log_filter.user_id)
        if log_filter.date_from is not None:
            query = query.gte("date", log_filter.date_from.isoformat())
        if log_filter.date_to is not None:
            query = query.lte("date", log_filter.date_to.isoformat())
        return query

    def create(
        self,
        user_id: str,
        *,
        description: str,
        duration: int,
        date: datetime,
    ) -> Exercise:
        """Insert a new exercise entry."""
        record = {
            "user_id": user_id,
            "description": description,
            "duration": duration,
            "date": date.isoformat(),
        }
        try:
            result = self._client.table(self._table).insert(record).execute()
        except Exception as e:
            logger.error(f"Failed to create exercise for user {user_id}: {e}")
            raise PersistenceError(f"Failed to create exercise: {e}") from e

        if not result.data:
            raise PersistenceError("Insert returned no exercise row")
        return _row_to_exercise(result.data[0])

    def find(self, log_filter: LogFilter, result_spec: ResultSpec) -> List[Exercise]:
        """
        Read entries matching a filter, sorted and capped per result_spec.

        Rows are fetched in ``page_size`` windows with ``range`` until a short
        page comes back or the cap is reached, so the server's max-rows
        setting never truncates an uncapped read. Ties on the sort field are
        broken by id to keep page boundaries stable.
        """
        limit = result_spec.limit
        rows: List[Dict[str, Any]] = []
        try:
            while True:
                start = len(rows)
                end = start + self._page_size - 1
                if limit is not None:
                    end = min(end, limit - 1)

                query = self._client.table(self._table).select(LOG_COLUMNS)
                query = self._apply_filter(query, log_filter)
                result = query \
                    .order(result_spec.sort_field, desc=not result_spec.ascending) \
                    .order("id") \
                    .range(start, end) \
                    .execute()

                page = result.data or []
                rows.extend(page)
                if len(page) < end - start + 1:
                    break
                if limit is not None and len(rows) >= limit:
                    break
        except Exception as e:
            logger.error(f"Failed to read exercises for user {log_filter.user_id}: {e}")
            raise PersistenceError(f"Failed to read exercises: {e}") from e

        return [_row_to_exercise(row) for row in rows]

    def count(self, log_filter: LogFilter) -> int:
        """Count entries matching a filter."""
        try:
            query = self._client.table(self._table).select("id", count="exact")
            query = self._apply_filter(query, log_filter)
            result = query.execute()
        except Exception as e:
            logger.error(f"Failed to count exercises for user {log_filter.user_id}: {e}")
            raise PersistenceError(f"Failed to count exercises: {e}") from e

        return result.count or 0
