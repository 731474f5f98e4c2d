"""
User and Exercise Log Schemas.

Response models for the /api/users endpoints. Dates are rendered with
application.validation.format_date (``"Mon Jan 01 2024"``).
"""

from typing import List

from pydantic import BaseModel, Field

from application.use_cases import AddExerciseResult, ExerciseLogResult
from application.validation import format_date
from domain.models import Exercise, User


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str = Field(..., description="Human-readable error message")


class UserResponse(BaseModel):
    """A registered user."""
    id: str
    username: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Convert a User to its response model."""
        return cls(id=user.id, username=user.username)


class ExerciseResponse(BaseModel):
    """An exercise just logged, together with its owner."""
    id: str = Field(..., description="Owning user's id")
    username: str
    description: str
    duration: int
    date: str = Field(..., description="Calendar date, e.g. 'Mon Jan 01 2024'")

    @classmethod
    def from_result(cls, result: AddExerciseResult) -> "ExerciseResponse":
        """Convert an AddExerciseResult to its response model."""
        return cls(
            id=result.user.id,
            username=result.user.username,
            description=result.exercise.description,
            duration=result.exercise.duration,
            date=format_date(result.exercise.date),
        )


class LogEntryResponse(BaseModel):
    """A single entry of an exercise log."""
    description: str
    duration: int
    date: str = Field(..., description="Calendar date, e.g. 'Mon Jan 01 2024'")

    @classmethod
    def from_exercise(cls, exercise: Exercise) -> "LogEntryResponse":
        """Convert an Exercise to a log entry."""
        return cls(
            description=exercise.description,
            duration=exercise.duration,
            date=format_date(exercise.date),
        )


class ExerciseLogResponse(BaseModel):
    """A user's exercise log."""
    id: str
    username: str
    count: int = Field(..., description="Entries matching the date filter, ignoring limit")
    log: List[LogEntryResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ExerciseLogResult) -> "ExerciseLogResponse":
        """Convert an ExerciseLogResult to its response model."""
        return cls(
            id=result.user.id,
            username=result.user.username,
            count=result.count,
            log=[LogEntryResponse.from_exercise(e) for e in result.log],
        )
