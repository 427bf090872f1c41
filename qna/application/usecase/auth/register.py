"""Register use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import PasswordService, UserService
from qna.domain.value import Username


class RegisterRequest(BaseModel):
    """Register request from the signup form."""

    username: str
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=256)


class RegisterResponse(BaseModel):
    """Register response."""

    user_id: str
    username: Username
    email: str
    created_at: datetime


class RegisterUseCase(BaseUseCase[RegisterRequest, RegisterResponse]):
    """Use case for creating an account with email and password."""

    def __init__(
        self, user_service: UserService, password_service: PasswordService
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            password_service: Password hashing domain service
        """
        self.user_service = user_service
        self.password_service = password_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Args:
            request: Register request

        Returns:
            Summary of the new account (never the password hash)

        Raises:
            BusinessRuleViolationError: If the email is already registered or
                the password is longer than 72 bytes
            ValueError: If the username is invalid
        """
        with logfire.span("register.execute"):
            user = await self.user_service.register_user(
                username=Username(request.username),
                email=request.email,
                password_hash=self.password_service.hash_password(request.password),
            )

            return RegisterResponse(
                user_id=str(user.id),
                username=user.username,
                email=user.email,
                created_at=user.created_at,
            )
