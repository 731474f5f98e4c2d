"""
Application Use Cases for the Exercise Tracker API.

This package contains application-level use cases that orchestrate
validation, query construction and repository ports. Use cases are the
entry points for business operations.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses
- Client errors and ServerError are raised, never returned

Usage:
    from application.use_cases import CreateUserUseCase, GetLogsUseCase

    user = CreateUserUseCase(user_repo=user_repo).execute("ada")

    result = GetLogsUseCase(
        user_repo=user_repo,
        exercise_repo=exercise_repo,
    ).execute(user.id, date_from="2024-01-01", limit="10")
"""

from application.use_cases.create_user import CreateUserUseCase
from application.use_cases.list_users import ListUsersUseCase
from application.use_cases.add_exercise import AddExerciseResult, AddExerciseUseCase
from application.use_cases.get_logs import ExerciseLogResult, GetLogsUseCase

__all__ = [
    # CreateUser
    "CreateUserUseCase",
    # ListUsers
    "ListUsersUseCase",
    # AddExercise
    "AddExerciseUseCase",
    "AddExerciseResult",
    # GetLogs
    "GetLogsUseCase",
    "ExerciseLogResult",
]
