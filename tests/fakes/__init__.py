"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Records calls and can simulate store failures (fail_on)
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeUserRepository, create_exercise_repo

    # Direct instantiation
    repo = FakeUserRepository()
    repo.seed([{"username": "ada"}])

    # Factory function with pre-populated data
    repo = create_exercise_repo(user_id=user.id, dates=["2024-01-01", "2024-01-02"])
"""
from datetime import datetime, timezone
from typing import List, Optional

# Import all fake implementations
from tests.fakes.user_repository import FakeUserRepository
from tests.fakes.exercise_repository import FakeExerciseRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_user_repo(
    *,
    usernames: Optional[List[str]] = None,
) -> FakeUserRepository:
    """
    Create a FakeUserRepository with optional pre-registered users.

    Args:
        usernames: Usernames to register

    Returns:
        Pre-populated FakeUserRepository
    """
    repo = FakeUserRepository()
    if usernames:
        repo.seed([{"username": name} for name in usernames])
    return repo


def create_exercise_repo(
    *,
    user_id: str,
    dates: Optional[List[str]] = None,
    duration: int = 30,
) -> FakeExerciseRepository:
    """
    Create a FakeExerciseRepository with one entry per date.

    Args:
        user_id: Owner of the generated entries
        dates: ISO dates (``YYYY-MM-DD``), one entry each
        duration: Duration for every generated entry

    Returns:
        Pre-populated FakeExerciseRepository
    """
    repo = FakeExerciseRepository()
    if dates:
        repo.seed([
            {
                "user_id": user_id,
                "description": f"Exercise {i + 1}",
                "duration": duration,
                "date": datetime.fromisoformat(d).replace(tzinfo=timezone.utc),
            }
            for i, d in enumerate(dates)
        ])
    return repo


__all__ = [
    "FakeUserRepository",
    "FakeExerciseRepository",
    "create_user_repo",
    "create_exercise_repo",
]
