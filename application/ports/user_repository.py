"""
User Repository Interface (Port).

This module defines the abstract interface for user persistence.
Implementations may use Supabase or other backends.
"""
from typing import List, Optional, Protocol

from domain.models import User


class UserRepository(Protocol):
    """
    Abstract interface for user persistence.

    Implementations raise application.exceptions.PersistenceError on store
    faults and DuplicateRecordError when an insert collides with an existing
    username.
    """

    def create(self, username: str) -> User:
        """
        Insert a new user.

        Args:
            username: Username as submitted (validated as non-blank)

        Returns:
            The stored user with its generated id

        Raises:
            DuplicateRecordError: If the username is already taken
        """
        ...

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get a user by id.

        Args:
            user_id: User id

        Returns:
            User or None if not found
        """
        ...

    def find_by_username(self, username: str) -> Optional[User]:
        """
        Find a user by exact username match.

        Args:
            username: Username to look up

        Returns:
            User or None if not found
        """
        ...

    def list_all(self) -> List[User]:
        """
        List every user. Order is not guaranteed.

        Returns:
            List of users
        """
        ...
