"""
Domain layer for the Exercise Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import Exercise, User

__all__ = [
    "Exercise",
    "User",
]
