"""
Get Logs Use Case.

Reads a user's exercise log, optionally bounded by date and capped in
length. The reported count is the size of the whole match set, taken with
its own query, so a capped log still tells the caller how many entries
matched.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from application.exceptions import NotFoundError, PersistenceError, ServerError
from application.ports import ExerciseRepository, UserRepository
from application.queries import build_log_query
from application.validation import validate_identifier
from domain.models import Exercise, User

logger = logging.getLogger(__name__)


@dataclass
class ExerciseLogResult:
    """Result of reading a user's exercise log."""
    user: User
    count: int = 0
    log: List[Exercise] = field(default_factory=list)


class GetLogsUseCase:
    """
    Use case for reading exercise logs.

    All query parameters are validated before any exercise read, so bad
    ``from``/``to``/``limit`` values never cost a store round trip beyond
    the owner lookup.
    """

    def __init__(self, user_repo: UserRepository, exercise_repo: ExerciseRepository):
        """
        Initialize with required dependencies.

        Args:
            user_repo: Repository for user lookups
            exercise_repo: Repository for exercise reads
        """
        self._user_repo = user_repo
        self._exercise_repo = exercise_repo

    def execute(
        self,
        user_id: Any,
        *,
        date_from: Optional[Any] = None,
        date_to: Optional[Any] = None,
        limit: Optional[Any] = None,
    ) -> ExerciseLogResult:
        """
        Read a user's log.

        Args:
            user_id: Owning user's id (path parameter)
            date_from: Optional inclusive lower date bound
            date_to: Optional inclusive upper date bound
            limit: Optional maximum number of entries to return

        Returns:
            ExerciseLogResult with the user, total match count and entries
            sorted by date ascending

        Raises:
            InvalidIdentifierError: Malformed user id
            NotFoundError: No user with this id
            InvalidDateError: Unparseable ``from`` or ``to``
            InvalidNumberError: Unparseable ``limit``
            ServerError: On any persistence fault
        """
        user_id = validate_identifier(user_id)

        try:
            user = self._user_repo.get_by_id(user_id)
            if user is None:
                logger.info("Get logs: user %s not found", user_id)
                raise NotFoundError("User not found")

            log_filter, result_spec = build_log_query(
                user.id,
                date_from=date_from,
                date_to=date_to,
                limit=limit,
            )

            count = self._exercise_repo.count(log_filter)
            log = self._exercise_repo.find(log_filter, result_spec)
        except PersistenceError as e:
            logger.exception("Failed to read logs for user %s: %s", user_id, e)
            raise ServerError() from e

        logger.debug(
            "Log for user %s: %d of %d entries (limit=%s)",
            user.id, len(log), count, result_spec.limit,
        )
        return ExerciseLogResult(user=user, count=count, log=log)
