"""
Create User Use Case.

Registers a username, returning the existing user when the name is taken.
"""
import logging
from typing import Any

from application.exceptions import DuplicateRecordError, PersistenceError, ServerError
from application.ports import UserRepository
from application.validation import validate_required_string
from domain.models import User

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for registering users.

    Creation is idempotent per username: a second call with the same name
    returns the first call's record instead of failing or duplicating it.
    """

    def __init__(self, user_repo: UserRepository):
        """
        Initialize with required dependencies.

        Args:
            user_repo: Repository for user persistence
        """
        self._user_repo = user_repo

    def execute(self, username: Any) -> User:
        """
        Find or create the user with the given username.

        Args:
            username: Raw username from the request body

        Returns:
            The existing or newly created user

        Raises:
            MissingFieldError: If the username is absent or blank
            ServerError: On any persistence fault
        """
        # The lookup uses the name as sent; blank names never reach the store.
        validate_required_string(username, "username")

        try:
            existing = self._user_repo.find_by_username(username)
            if existing is not None:
                return existing

            try:
                user = self._user_repo.create(username)
            except DuplicateRecordError:
                # Lost a race with a concurrent create for the same name
                logger.info("Username %r created concurrently, returning existing", username)
                user = self._user_repo.find_by_username(username)
                if user is None:
                    raise PersistenceError(f"User {username!r} vanished after duplicate insert")
                return user
        except PersistenceError as e:
            logger.exception("Failed to create user %r: %s", username, e)
            raise ServerError() from e

        logger.info("Created user %s (%s)", user.id, user.username)
        return user
