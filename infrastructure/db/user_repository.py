"""
Supabase User Repository Implementation.

This module implements the UserRepository protocol using Supabase as the backend.

Expected table (default name ``users``)::

    create table users (
        id uuid primary key default gen_random_uuid(),
        username text not null unique
    );
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import DuplicateRecordError, PersistenceError
from domain.models import User

logger = logging.getLogger(__name__)

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION_CODE = "23505"

# PostgREST's default max-rows; listing pages in windows of this size
PAGE_SIZE = 1000


def is_unique_violation(error: Exception) -> bool:
    """Check whether a PostgREST error reports a unique constraint violation."""
    return str(getattr(error, "code", "")) == UNIQUE_VIOLATION_CODE


def _row_to_user(row: Dict[str, Any]) -> User:
    return User(id=str(row["id"]), username=row["username"])


class SupabaseUserRepository:
    """
    Supabase implementation of UserRepository protocol.

    Store errors are logged and re-raised as PersistenceError; unique
    violations on insert become DuplicateRecordError.
    """

    def __init__(self, client: Client, table: str = "users", page_size: int = PAGE_SIZE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the users table
            page_size: Rows requested per round trip when listing
        """
        self._client = client
        self._table = table
        self._page_size = page_size

    def create(self, username: str) -> User:
        """Insert a new user."""
        try:
            result = self._client.table(self._table).insert({"username": username}).execute()
        except Exception as e:
            if is_unique_violation(e):
                raise DuplicateRecordError(f"Username {username!r} already exists") from e
            logger.error(f"Failed to create user {username!r}: {e}")
            raise PersistenceError(f"Failed to create user: {e}") from e

        if not result.data:
            raise PersistenceError("Insert returned no user row")
        return _row_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by id."""
        try:
            result = self._client.table(self._table).select("id, username").eq("id", user_id).limit(1).execute()
        except Exception as e:
            logger.error(f"Failed to get user {user_id}: {e}")
            raise PersistenceError(f"Failed to get user: {e}") from e

        if result.data:
            return _row_to_user(result.data[0])
        return None

    def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by exact username match."""
        try:
            result = self._client.table(self._table).select("id, username").eq("username", username).limit(1).execute()
        except Exception as e:
            logger.error(f"Failed to find user {username!r}: {e}")
            raise PersistenceError(f"Failed to find user: {e}") from e

        if result.data:
            return _row_to_user(result.data[0])
        return None

    def list_all(self) -> List[User]:
        """List every user, reading ``page_size`` rows per request ordered by id."""
        rows: List[Dict[str, Any]] = []
        try:
            while True:
                start = len(rows)
                end = start + self._page_size - 1
                result = self._client.table(self._table) \
                    .select("id, username") \
                    .order("id") \
                    .range(start, end) \
                    .execute()
                page = result.data or []
                rows.extend(page)
                if len(page) < self._page_size:
                    break
        except Exception as e:
            logger.error(f"Failed to list users: {e}")
            raise PersistenceError(f"Failed to list users: {e}") from e

        return [_row_to_user(row) for row in rows]
