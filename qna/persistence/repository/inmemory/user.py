"""In-memory user repository for testing."""

from typing import Optional

from qna.domain.model.user import User
from qna.domain.repository import UserRepository
from qna.domain.value import UserId

from .store import InMemoryStore, constraint_violation


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If the email is already registered
        """
        if any(u.email == user.email for u in self._store.users.values()):
            raise constraint_violation("INSERT INTO users", "uq_users_email")

        self._store.users[user.id] = user
        return user

    async def count(self) -> int:
        """Count registered users."""
        return len(self._store.users)
