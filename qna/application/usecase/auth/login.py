"""Login use case."""

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import UnauthorizedError
from qna.domain.service import JWTService, PasswordService, UserService
from qna.domain.value import Username


class LoginRequest(BaseModel):
    """Login request with email and password credentials."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str
    username: Username


class LoginUseCase(BaseUseCase[LoginRequest, LoginResponse]):
    """Use case for email/password login."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        password_service: PasswordService,
    ) -> None:
        """Initialize login use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
            password_service: Password hashing domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.password_service = password_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Look up the user by email
        2. Verify the password against the stored hash
        3. Issue a JWT for the session cookie

        Args:
            request: Login request

        Returns:
            Login response with JWT token

        Raises:
            UnauthorizedError: If the email is unknown or the password is wrong
        """
        with logfire.span("login.execute"):
            user = await self.user_service.get_user_by_email(request.email)

            # Same error for unknown email and wrong password
            if not user or not self.password_service.verify_password(
                request.password, user.password_hash
            ):
                logfire.warn("Login failed")
                raise UnauthorizedError("Invalid email or password")

            token = self.jwt_service.create_token(
                user_id=str(user.id), username=user.username.root
            )
            logfire.info("User logged in", user_id=str(user.id))

            return LoginResponse(
                token=token,
                user_id=str(user.id),
                username=user.username,
            )
