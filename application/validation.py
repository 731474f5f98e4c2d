"""
Input validation helpers.

Pure functions that check request values before they reach persistence.
Each helper either returns the normalized value or raises one of the
client errors from application.exceptions.
"""
import re
import uuid
from datetime import date, datetime, timezone
from typing import Any, Optional

from application.exceptions import (
    InvalidDateError,
    InvalidIdentifierError,
    InvalidNumberError,
    MissingFieldError,
)

# Leading whitespace, optional sign, then the leading run of ASCII digits
LENIENT_INT_PATTERN = re.compile(r"^\s*([+-]?[0-9]+)")

# Rendered form produced by format_date, accepted back as input
DISPLAY_DATE_FORMAT = "%a %b %d %Y"

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def validate_identifier(value: Any) -> str:
    """
    Check that a value is a well-formed record identifier.

    The store generates UUID primary keys, so only canonical hyphenated
    UUID strings are accepted.

    Args:
        value: Raw identifier (usually a path parameter)

    Returns:
        The identifier, lowercased

    Raises:
        InvalidIdentifierError: If the value is not a canonical UUID string
    """
    if not isinstance(value, str) or len(value) != 36:
        raise InvalidIdentifierError()
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        raise InvalidIdentifierError()
    if str(parsed) != value.lower():
        raise InvalidIdentifierError()
    return str(parsed)


def validate_required_string(value: Any, field_name: str) -> str:
    """
    Check that a string field is present and not blank.

    Args:
        value: Raw field value
        field_name: Field name used in the error message

    Returns:
        The value with surrounding whitespace removed

    Raises:
        MissingFieldError: If the value is absent, not a string, or blank
    """
    if not isinstance(value, str) or not value.strip():
        raise MissingFieldError(f"{field_name} is required")
    return value.strip()


def is_present(value: Any) -> bool:
    """Truthiness check used for fields that are parsed later."""
    if isinstance(value, str):
        return value != ""
    return bool(value)


def parse_integer(value: Any, field_name: str) -> int:
    """
    Parse an integer leniently.

    Strings are read up to the first non-digit: ``"30abc"`` gives 30 and
    ``"12.9"`` gives 12. Real numbers are truncated toward zero.

    Raises:
        InvalidNumberError: If no leading integer can be read
    """
    if isinstance(value, bool):
        raise InvalidNumberError(f"Invalid {field_name}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise InvalidNumberError(f"Invalid {field_name}")
        return int(value)
    if isinstance(value, str):
        match = LENIENT_INT_PATTERN.match(value)
        if match:
            return int(match.group(1))
    raise InvalidNumberError(f"Invalid {field_name}")


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _date_error_message(field_name: Optional[str]) -> Optional[str]:
    return f"Invalid {field_name} date" if field_name else None


def parse_date(value: Any, field_name: Optional[str] = None) -> datetime:
    """
    Resolve a calendar date from request input.

    Absent values (None or an empty string) resolve to the current instant.
    Strings are read as ISO-8601 dates or date-times, or in the rendered
    ``"Mon Jan 01 2024"`` form. Date-only and naive values are taken as UTC.

    Args:
        value: Raw date value
        field_name: Field named in the error message; without one the
            generic "Invalid date format" message is used

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        InvalidDateError: If a supplied value cannot be parsed
    """
    if value is None or value == "":
        return datetime.now(timezone.utc)
    return parse_optional_date(value, field_name)


def parse_optional_date(value: Any, field_name: Optional[str] = None) -> Optional[datetime]:
    """Like parse_date, but absent values resolve to None."""
    if value is None or value == "":
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = _parse_date_text(value.strip())
    else:
        parsed = None
    if parsed is None:
        raise InvalidDateError(_date_error_message(field_name))

    try:
        return _to_utc(parsed)
    except OverflowError:
        # Offset pushes the instant outside the representable range
        raise InvalidDateError(_date_error_message(field_name))


def _parse_date_text(text: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass
    try:
        return datetime.strptime(text, DISPLAY_DATE_FORMAT)
    except ValueError:
        return None


def format_date(value: datetime) -> str:
    """
    Render a date as ``"Www Mmm DD YYYY"`` (e.g. ``"Mon Jan 01 2024"``).

    Rendered in UTC without relying on the process locale.
    """
    value = _to_utc(value)
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )
