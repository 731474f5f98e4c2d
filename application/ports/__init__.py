"""
Repository Interfaces (Ports) for the Exercise Tracker API.

This package defines abstract interfaces that decouple application logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import UserRepository, ExerciseRepository

    class AddExerciseUseCase:
        def __init__(self, user_repo: UserRepository, exercise_repo: ExerciseRepository):
            self._user_repo = user_repo
            self._exercise_repo = exercise_repo
"""

# User persistence
from application.ports.user_repository import UserRepository

# Exercise entry persistence
from application.ports.exercise_repository import ExerciseRepository

__all__ = [
    "UserRepository",
    "ExerciseRepository",
]
