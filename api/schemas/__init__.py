"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- users: User, exercise and log response models
"""

from api.schemas.users import (
    ErrorResponse,
    UserResponse,
    ExerciseResponse,
    LogEntryResponse,
    ExerciseLogResponse,
)

__all__ = [
    "ErrorResponse",
    "UserResponse",
    "ExerciseResponse",
    "LogEntryResponse",
    "ExerciseLogResponse",
]
