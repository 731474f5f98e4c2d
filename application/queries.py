"""
Query construction for exercise log reads.

Turns the raw get-logs query parameters into filter conditions
(owner plus optional inclusive date bounds) and a result shape
(sort order plus optional row cap). Both are plain values that the
ExerciseRepository port translates into store queries.

The count of matching rows is taken with the filter alone. The result
shape only applies to the row read, so callers always learn the full
size of the match set regardless of the cap.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple

from application.validation import parse_integer, parse_optional_date


@dataclass(frozen=True)
class LogFilter:
    """Conditions narrowing which exercises match."""
    user_id: str
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


@dataclass(frozen=True)
class ResultSpec:
    """Sort order and optional row cap for a filtered read."""
    sort_field: str = "date"
    ascending: bool = True
    limit: Optional[int] = None


def resolve_limit(raw_limit: Any) -> Optional[int]:
    """
    Convert a raw ``limit`` parameter into a row cap.

    Absent or empty means no cap. Zero also means no cap, and a negative
    value caps at its absolute value, matching document-store semantics.

    Raises:
        InvalidNumberError: If the value has no leading integer
    """
    if raw_limit is None or raw_limit == "":
        return None
    limit = parse_integer(raw_limit, "limit")
    if limit == 0:
        return None
    return abs(limit)


def build_log_query(
    user_id: str,
    date_from: Any = None,
    date_to: Any = None,
    limit: Any = None,
) -> Tuple[LogFilter, ResultSpec]:
    """
    Build the filter and result shape for a log read.

    Args:
        user_id: Owner of the exercises (an existing user's id)
        date_from: Optional inclusive lower bound (raw query value)
        date_to: Optional inclusive upper bound (raw query value)
        limit: Optional row cap (raw query value)

    Returns:
        (LogFilter, ResultSpec) tuple

    Raises:
        InvalidDateError: If a supplied bound cannot be parsed
        InvalidNumberError: If a supplied limit cannot be parsed
    """
    log_filter = LogFilter(
        user_id=user_id,
        date_from=parse_optional_date(date_from, "from"),
        date_to=parse_optional_date(date_to, "to"),
    )
    result_spec = ResultSpec(limit=resolve_limit(limit))
    return log_filter, result_spec
