"""
Domain models for the Exercise Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- User: A registered user, unique by username
- Exercise: A timed exercise entry owned by a user

Usage:
    >>> from datetime import datetime, timezone
    >>> from domain.models import User, Exercise

    >>> user = User(id="6f1c1b6e-7c57-4f4e-9d55-1a1f6b0f5e2a", username="ada")
    >>> entry = Exercise(
    ...     user_id=user.id,
    ...     description="Rowing",
    ...     duration=20,
    ...     date=datetime(2024, 3, 1, tzinfo=timezone.utc),
    ... )
"""

from domain.models.exercise import Exercise
from domain.models.user import User

__all__ = [
    "User",
    "Exercise",
]
