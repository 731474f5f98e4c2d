"""
Exercise Repository Interface (Port).

This module defines the abstract interface for exercise entry persistence.
Reads take the LogFilter / ResultSpec values built by application.queries.
"""
from datetime import datetime
from typing import List, Protocol

from application.queries import LogFilter, ResultSpec
from domain.models import Exercise


class ExerciseRepository(Protocol):
    """
    Abstract interface for exercise entry persistence.

    Implementations raise application.exceptions.PersistenceError on store
    faults.
    """

    def create(
        self,
        user_id: str,
        *,
        description: str,
        duration: int,
        date: datetime,
    ) -> Exercise:
        """
        Insert a new exercise entry.

        Args:
            user_id: Owning user's id
            description: Trimmed description
            duration: Parsed duration
            date: Resolved entry date

        Returns:
            The stored entry with its generated id
        """
        ...

    def find(self, log_filter: LogFilter, result_spec: ResultSpec) -> List[Exercise]:
        """
        Read entries matching a filter.

        Only description, duration and date are projected; ``id`` and
        ``user_id`` on the returned entries are None.

        Args:
            log_filter: Owner and optional inclusive date bounds
            result_spec: Sort order and optional row cap

        Returns:
            Matching entries in the requested order, capped by the limit
        """
        ...

    def count(self, log_filter: LogFilter) -> int:
        """
        Count entries matching a filter, ignoring any row cap.

        Args:
            log_filter: Owner and optional inclusive date bounds

        Returns:
            Number of matching entries
        """
        ...
