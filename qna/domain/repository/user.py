"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.user import User
from qna.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the email is already registered
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count registered users."""
        pass
