"""
List Users Use Case.
"""
import logging
from typing import List

from application.exceptions import PersistenceError, ServerError
from application.ports import UserRepository
from domain.models import User

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Use case for listing every registered user."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    def execute(self) -> List[User]:
        """
        List all users. Order is not guaranteed.

        Raises:
            ServerError: On any persistence fault
        """
        try:
            return self._user_repo.list_all()
        except PersistenceError as e:
            logger.exception("Failed to list users: %s", e)
            raise ServerError() from e
