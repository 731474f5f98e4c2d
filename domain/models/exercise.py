"""
Exercise entry entity.

A single timed exercise logged against a user. Entries are immutable once
stored; ordering between them is decided at query time by their date.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Exercise(BaseModel):
    """
    A logged exercise entry.

    ``id`` and ``user_id`` are absent when the entry comes from a projected
    log read, which only returns description, duration and date.

    Examples:
        >>> from datetime import datetime, timezone
        >>> entry = Exercise(
        ...     user_id="6f1c1b6e-7c57-4f4e-9d55-1a1f6b0f5e2a",
        ...     description="Morning run",
        ...     duration=30,
        ...     date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ... )
        >>> entry.duration
        30
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(default=None, description="Store-generated identifier")
    user_id: Optional[str] = Field(default=None, description="Owning user's id")
    description: str = Field(..., min_length=1, description="What was done")
    duration: int = Field(..., description="Duration in minutes")
    date: datetime = Field(..., description="When the exercise took place")

    @field_validator("date")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Store dates as timezone-aware UTC values."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
