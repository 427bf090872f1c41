"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from qna.domain.error import BusinessRuleViolationError, NotFoundError
from qna.domain.model import User
from qna.domain.repository import UserRepository
from qna.domain.value import UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            return await self.user_repository.find_by_email(email.strip().lower())

    async def register_user(
        self, username: Username, email: str, password_hash: str
    ) -> User:
        """Create a new user account.

        Args:
            username: Display name
            email: Email address (stored lower-cased)
            password_hash: Already-hashed password

        Returns:
            Created user

        Raises:
            BusinessRuleViolationError: If the email is already registered
        """
        normalized_email = email.strip().lower()
        with logfire.span("user_service.register_user", username=username.root):
            existing = await self.user_repository.find_by_email(normalized_email)
            if existing:
                logfire.warn("Registration with existing email", user_id=str(existing.id))
                raise BusinessRuleViolationError("User with this email already exists")

            user = User(
                id=UserId(uuid4()),
                username=username,
                email=normalized_email,
                password_hash=password_hash,
                created_at=datetime.now(),
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race against a concurrent registration
                logfire.warn("Duplicate email on insert", username=username.root)
                raise BusinessRuleViolationError("User with this email already exists")

            logfire.info("User registered", user_id=str(saved.id))
            return saved
