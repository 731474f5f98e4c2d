"""
Add Exercise Use Case.

Validates an exercise submission, checks the owning user exists and stores
the entry.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from application.exceptions import (
    MissingFieldError,
    NotFoundError,
    PersistenceError,
    ServerError,
)
from application.ports import ExerciseRepository, UserRepository
from application.validation import (
    is_present,
    parse_date,
    parse_integer,
    validate_identifier,
    validate_required_string,
)
from domain.models import Exercise, User

logger = logging.getLogger(__name__)


@dataclass
class AddExerciseResult:
    """Result of adding an exercise: the owner and the stored entry."""
    user: User
    exercise: Exercise


class AddExerciseUseCase:
    """
    Use case for logging an exercise against a user.

    Checks run in a fixed order: identifier format, required fields, owner
    lookup, date, then duration. The first failing check decides the error.
    """

    def __init__(self, user_repo: UserRepository, exercise_repo: ExerciseRepository):
        """
        Initialize with required dependencies.

        Args:
            user_repo: Repository for user lookups
            exercise_repo: Repository for exercise persistence
        """
        self._user_repo = user_repo
        self._exercise_repo = exercise_repo

    def execute(
        self,
        user_id: Any,
        *,
        description: Any,
        duration: Any,
        date: Optional[Any] = None,
    ) -> AddExerciseResult:
        """
        Add an exercise entry.

        Args:
            user_id: Owning user's id (path parameter)
            description: Raw description
            duration: Raw duration (string or number)
            date: Optional raw date; defaults to now

        Returns:
            AddExerciseResult with the owner and the stored entry

        Raises:
            InvalidIdentifierError: Malformed user id
            MissingFieldError: Blank description or missing duration
            NotFoundError: No user with this id
            InvalidDateError: Unparseable date
            InvalidNumberError: Unparseable duration
            ServerError: On any persistence fault
        """
        user_id = validate_identifier(user_id)
        try:
            description = validate_required_string(description, "description")
        except MissingFieldError:
            raise MissingFieldError("Description and duration are required")
        if not is_present(duration):
            raise MissingFieldError("Description and duration are required")

        try:
            user = self._user_repo.get_by_id(user_id)
            if user is None:
                logger.info("Add exercise: user %s not found", user_id)
                raise NotFoundError("User not found")

            exercise_date = parse_date(date)
            parsed_duration = parse_integer(duration, "duration")

            exercise = self._exercise_repo.create(
                user.id,
                description=description,
                duration=parsed_duration,
                date=exercise_date,
            )
        except PersistenceError as e:
            logger.exception("Failed to add exercise for user %s: %s", user_id, e)
            raise ServerError() from e

        logger.info("Added exercise %s for user %s", exercise.id, user.id)
        return AddExerciseResult(user=user, exercise=exercise)
